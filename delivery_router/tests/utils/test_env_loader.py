import unittest
import os
import tempfile
from delivery_router.utils.env_loader import load_env_from_file


class TestEnvLoader(unittest.TestCase):

    def setUp(self):
        # Store original environment variables to restore them later
        self.original_environ = os.environ.copy()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_env_file_path = os.path.join(self.temp_dir.name, ".env.test")

    def tearDown(self):
        os.environ.clear()
        os.environ.update(self.original_environ)
        self.temp_dir.cleanup()

    def create_test_env_file(self, content):
        with open(self.test_env_file_path, 'w') as f:
            f.write(content)

    def test_load_env_successful(self):
        content = (
            "ROUTER_TEST_KEY1=value1\n"
            "# This is a comment\n"
            "ROUTER_TEST_KEY2 = value with spaces  \n"
            "\n"
            "ROUTER_TEST_EMPTY=\n"
            "ROUTER_TEST_QUOTED=\"data/graph.txt\"\n"
            "ROUTER_TEST_SINGLE='dijkstra'\n"
            "ROUTER_TEST_URL=postgres://u:p@host/db?opt=1\n"
        )
        self.create_test_env_file(content)

        with self.assertLogs('delivery_router.utils.env_loader', level='INFO') as cm:
            result = load_env_from_file(self.test_env_file_path)

        self.assertTrue(result)
        self.assertEqual(os.environ.get("ROUTER_TEST_KEY1"), "value1")
        self.assertEqual(os.environ.get("ROUTER_TEST_KEY2"), "value with spaces")
        self.assertEqual(os.environ.get("ROUTER_TEST_EMPTY"), "")
        self.assertEqual(os.environ.get("ROUTER_TEST_QUOTED"), "data/graph.txt")
        self.assertEqual(os.environ.get("ROUTER_TEST_SINGLE"), "dijkstra")
        # Only the first '=' separates key and value
        self.assertEqual(os.environ.get("ROUTER_TEST_URL"), "postgres://u:p@host/db?opt=1")
        self.assertIn(
            f"INFO:delivery_router.utils.env_loader:Loaded environment variables from {self.test_env_file_path}",
            cm.output
        )

    def test_load_env_file_not_found(self):
        non_existent_file = os.path.join(self.temp_dir.name, "non_existent.env")
        with self.assertLogs('delivery_router.utils.env_loader', level='DEBUG') as cm:
            result = load_env_from_file(non_existent_file)

        self.assertFalse(result)
        self.assertIn(
            f"DEBUG:delivery_router.utils.env_loader:Environment file not found: {non_existent_file}",
            cm.output
        )

    def test_load_env_malformed_line_is_skipped(self):
        self.create_test_env_file("MALFORMED_LINE_NO_EQUALS_SIGN\nROUTER_TEST_KEY1=ok\n")

        with self.assertLogs('delivery_router.utils.env_loader', level='WARNING') as cm:
            result = load_env_from_file(self.test_env_file_path)

        self.assertTrue(result)
        self.assertEqual(os.environ.get("ROUTER_TEST_KEY1"), "ok")
        self.assertNotIn("MALFORMED_LINE_NO_EQUALS_SIGN", os.environ)
        self.assertTrue(any("line 1" in message for message in cm.output))

    def test_existing_variables_are_kept(self):
        os.environ["ROUTER_TEST_EXISTING"] = "original"
        self.create_test_env_file("ROUTER_TEST_EXISTING=from_file\n")

        self.assertTrue(load_env_from_file(self.test_env_file_path))
        self.assertEqual(os.environ.get("ROUTER_TEST_EXISTING"), "original")

    def test_override_existing_variables(self):
        os.environ["ROUTER_TEST_EXISTING"] = "original"
        self.create_test_env_file("ROUTER_TEST_EXISTING=from_file\n")

        self.assertTrue(load_env_from_file(self.test_env_file_path, override=True))
        self.assertEqual(os.environ.get("ROUTER_TEST_EXISTING"), "from_file")


if __name__ == '__main__':
    unittest.main()
