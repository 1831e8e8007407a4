"""
Tests for the Floyd-Warshall implementation.

This module contains tests for the FloydWarshallPathFinder class.
"""
import math
import unittest

import numpy as np

from delivery_router.core.constants import NO_NEXT_HOP
from delivery_router.core.exceptions import GraphFormatError, UnknownNodeError
from delivery_router.core.floyd_warshall import FloydWarshallPathFinder, FloydWarshallTable
from delivery_router.core.graph import GraphBuilder
from delivery_router.core.shortest_paths import ShortestPathAlgorithm


class TestFloydWarshallPathFinder(unittest.TestCase):
    """Test cases for FloydWarshallPathFinder."""

    def setUp(self):
        """Set up test fixtures."""
        self.path_finder = FloydWarshallPathFinder()

        # Triangle where the direct A-C edge is longer than going through B
        self.triangle_graph = GraphBuilder.from_edges([('A', 'B', 1), ('B', 'C', 1), ('A', 'C', 5)])

        # Classic six-node city graph
        self.city_graph = GraphBuilder.from_edges([
            ('A', 'B', 7), ('A', 'C', 9), ('A', 'F', 14),
            ('B', 'C', 10), ('B', 'D', 15), ('C', 'D', 11),
            ('C', 'F', 2), ('D', 'E', 6), ('E', 'F', 9),
        ])

        # Graph with disconnected components
        self.disconnected_graph = GraphBuilder.from_edges([('A', 'B', 1), ('C', 'D', 2)])

    def test_algorithm(self):
        self.assertEqual(self.path_finder.algorithm, ShortestPathAlgorithm.FLOYD_WARSHALL)

    def test_triangle_distances_and_paths(self):
        table = self.path_finder.compute(self.triangle_graph)

        self.assertIsInstance(table, FloydWarshallTable)
        self.assertEqual(table.distance('A', 'B'), 1.0)
        self.assertEqual(table.distance('B', 'C'), 1.0)
        self.assertEqual(table.distance('A', 'C'), 2.0)
        self.assertEqual(table.distance('C', 'A'), 2.0)
        self.assertEqual(table.path('A', 'C'), ['A', 'B', 'C'])
        self.assertEqual(table.path('C', 'A'), ['C', 'B', 'A'])

    def test_diagonal_is_zero_and_self_path(self):
        table = self.path_finder.compute(self.city_graph)
        for node in table.node_ids:
            self.assertEqual(table.distance(node, node), 0.0)
            self.assertEqual(table.path(node, node), [node])

    def test_city_graph(self):
        table = self.path_finder.compute(self.city_graph)

        self.assertEqual(table.distance('A', 'F'), 11.0)
        self.assertEqual(table.path('A', 'F'), ['A', 'C', 'F'])
        self.assertEqual(table.distance('A', 'E'), 20.0)
        self.assertEqual(table.path('A', 'E'), ['A', 'C', 'F', 'E'])
        self.assertEqual(table.distance('F', 'D'), 13.0)
        self.assertEqual(table.path('F', 'D'), ['F', 'C', 'D'])

    def test_next_hop_matrix_initialization(self):
        dist, next_hops, node_ids = FloydWarshallPathFinder.calculate_distance_and_next_hops(self.triangle_graph)
        index = {node: i for i, node in enumerate(node_ids)}

        # Diagonal has no next hop recorded
        for i in range(len(node_ids)):
            self.assertEqual(next_hops[i, i], NO_NEXT_HOP)
        # The relaxed pair A->C goes through B first
        self.assertEqual(next_hops[index['A'], index['C']], index['B'])
        self.assertEqual(next_hops[index['A'], index['B']], index['B'])
        np.testing.assert_allclose(dist, dist.T)

    def test_disconnected_graph(self):
        table = self.path_finder.compute(self.disconnected_graph)

        self.assertTrue(math.isinf(table.distance('A', 'C')))
        self.assertFalse(table.is_reachable('A', 'D'))
        self.assertIsNone(table.path('A', 'C'))
        self.assertIsNone(table.path('D', 'B'))
        self.assertEqual(table.path('C', 'D'), ['C', 'D'])
        self.assertEqual(table.distance('D', 'C'), 2.0)

    def test_isolated_node(self):
        graph = GraphBuilder.from_edges([('A', 'B', 1)], nodes=['C'])
        table = self.path_finder.compute(graph)
        self.assertTrue(math.isinf(table.distance('A', 'C')))
        self.assertIsNone(table.path('C', 'A'))
        self.assertEqual(table.path('C', 'C'), ['C'])

    def test_empty_graph(self):
        table = self.path_finder.compute({})
        self.assertEqual(table.node_ids, [])
        self.assertEqual(table.matrix.shape, (0, 0))

    def test_unknown_node_lookup_raises(self):
        table = self.path_finder.compute(self.triangle_graph)
        with self.assertRaises(UnknownNodeError):
            table.distance('A', 'Z')
        with self.assertRaises(UnknownNodeError):
            table.path('Z', 'A')

    def test_negative_weights_rejected(self):
        with self.assertRaises(GraphFormatError):
            self.path_finder.compute({'A': {'B': -1.0}, 'B': {'A': -1.0}})

    def test_to_dict(self):
        table = self.path_finder.compute(self.triangle_graph)
        as_dict = table.to_dict()
        self.assertEqual(as_dict['A'], {'A': 0.0, 'B': 1.0, 'C': 2.0})
        self.assertEqual(set(as_dict), {'A', 'B', 'C'})


if __name__ == '__main__':
    unittest.main()
