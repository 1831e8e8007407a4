import json
import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase


class PlanTourCommandTests(SimpleTestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.temp_dir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_prints_summary(self):
        out = StringIO()
        call_command('plan_tour', '--start', '1', '--stops', '["6", "4"]', stdout=out)

        output = out.getvalue()
        self.assertIn("Starting City: Springfield (ID: 1)", output)
        self.assertIn("Delivery Points: 6: Oakdale, 4: Hillcrest", output)
        self.assertIn("Total Distance: 44 km", output)
        self.assertIn(
            "Route Order: Springfield (1) → Oakdale (6) → Hillcrest (4) → Springfield (1)",
            output
        )

    def test_prints_json(self):
        out = StringIO()
        call_command(
            'plan_tour', '--start', '1', '--stops', '["6", "4"]', '--algorithm', 'dijkstra', '--json',
            stdout=out
        )

        data = json.loads(out.getvalue())
        self.assertEqual(data['status'], 'success')
        self.assertEqual(data['algorithm'], 'dijkstra')
        self.assertEqual(data['tour'], ['1', '6', '4', '1'])
        self.assertEqual(data['full_path'], ['1', '3', '6', '3', '4', '3', '1'])
        self.assertEqual(data['total_distance'], 44.0)
        self.assertEqual(data['statistics']['path_nodes'], 7)

    def test_custom_graph_and_names(self):
        graph_file = self._write('graph.txt', "A B 1\nB C 1\nA C 5\n")
        names_file = self._write('names.txt', "A Alpha\nB Bravo\nC Charlie\n")
        out = StringIO()
        call_command(
            'plan_tour', '--start', 'A', '--stops', '["B", "C"]',
            '--graph', graph_file, '--names', names_file, stdout=out
        )

        output = out.getvalue()
        self.assertIn("Total Distance: 4 km", output)
        self.assertIn("Full Path: Alpha (A) → Bravo (B) → Charlie (C) → Bravo (B) → Alpha (A)", output)

    def test_missing_graph_file(self):
        with self.assertRaisesMessage(CommandError, "Graph file not found"):
            call_command('plan_tour', '--start', '1', '--graph', os.path.join(self.temp_dir.name, 'missing.txt'))

    def test_malformed_graph_file(self):
        graph_file = self._write('graph.txt', "A B -1\n")
        with self.assertRaisesMessage(CommandError, "is malformed"):
            call_command('plan_tour', '--start', 'A', '--graph', graph_file)

    def test_graph_file_not_utf8(self):
        graph_file = os.path.join(self.temp_dir.name, 'graph.txt')
        with open(graph_file, 'wb') as f:
            f.write(b"1 2 3\n\xff\xfe 4 5\n")

        with self.assertRaisesMessage(CommandError, "could not be read"):
            call_command('plan_tour', '--start', '1', '--graph', graph_file)

    def test_graph_file_is_directory(self):
        with self.assertRaisesMessage(CommandError, "could not be read"):
            call_command('plan_tour', '--start', '1', '--graph', self.temp_dir.name)

    def test_unreadable_names_file_falls_back_to_ids(self):
        names_file = os.path.join(self.temp_dir.name, 'names.txt')
        with open(names_file, 'wb') as f:
            f.write(b"\xff\xfe Springfield\n")
        out = StringIO()
        call_command('plan_tour', '--start', '1', '--stops', '["6"]', '--names', names_file, stdout=out)

        self.assertIn("Starting City: 1 (ID: 1)", out.getvalue())

    def test_unknown_city(self):
        with self.assertRaisesMessage(CommandError, "Unknown node(s) not present in graph: 42"):
            call_command('plan_tour', '--start', '1', '--stops', '["42"]', stdout=StringIO())
