from typing import Dict, List, Tuple, Optional, Sequence
import logging

import numpy as np

from delivery_router.core.graph import Graph, GraphBuilder
from delivery_router.core.path_reconstruction import reconstruct_path_from_predecessors
from delivery_router.core.shortest_paths import (
    AllPairsShortestPathFinder,
    ShortestPathAlgorithm,
    ShortestPathTable,
)

# Set up logging
logger = logging.getLogger(__name__)


class DijkstraTable(ShortestPathTable):
    """Distance matrix plus one predecessor map per source node."""

    def __init__(
        self,
        node_ids: Sequence[str],
        matrix: np.ndarray,
        predecessors: Dict[str, Dict[str, Optional[str]]]
    ):
        super().__init__(node_ids, matrix, ShortestPathAlgorithm.DIJKSTRA)
        self.predecessors = predecessors

    def path(self, from_node: str, to_node: str) -> Optional[List[str]]:
        self.index_of(from_node)
        self.index_of(to_node)
        return reconstruct_path_from_predecessors(from_node, to_node, self.predecessors[from_node])


class DijkstraPathFinder(AllPairsShortestPathFinder):
    """
    Implementation of Dijkstra's algorithm, run once per source node to
    cover every pair.
    """

    @property
    def algorithm(self) -> ShortestPathAlgorithm:
        return ShortestPathAlgorithm.DIJKSTRA

    @staticmethod
    def calculate_single_source(
        graph: Graph,
        source: str,
        node_ids: Optional[Sequence[str]] = None
    ) -> Tuple[Dict[str, float], Dict[str, Optional[str]]]:
        """
        Calculate shortest distances from one source to every node.

        The unsettled node with the smallest tentative distance is found by a
        linear scan (first in node order on ties), which keeps each run at
        O(n^2) without a priority queue.

        Args:
            graph: A dictionary of dictionaries representing the graph.
                   Format: {node1: {node2: distance, node3: distance, ...}, ...}
            source: Starting node.
            node_ids: Optional node order; defaults to GraphBuilder.node_ids(graph).

        Returns:
            A tuple of (distances, predecessors). Unreachable nodes keep an
            infinite distance and a None predecessor.
        """
        if node_ids is None:
            node_ids = GraphBuilder.node_ids(graph)

        # Initialize distances dictionary with infinity for all nodes except source
        distances = {node: float('inf') for node in node_ids}
        distances[source] = 0.0

        # Keep track of previous nodes to reconstruct the path
        predecessors: Dict[str, Optional[str]] = {node: None for node in node_ids}
        unsettled = set(node_ids)

        while unsettled:
            current_node = None
            min_distance = float('inf')
            for node in node_ids:
                if node in unsettled and distances[node] < min_distance:
                    min_distance = distances[node]
                    current_node = node

            # Remaining nodes are unreachable from source
            if current_node is None:
                break

            unsettled.remove(current_node)

            for neighbor, weight in graph.get(current_node, {}).items():
                # Settled nodes already hold their final distance (non-negative weights)
                if neighbor not in unsettled:
                    continue

                distance = min_distance + weight
                if distance < distances[neighbor]:
                    distances[neighbor] = distance
                    predecessors[neighbor] = current_node

        return distances, predecessors

    @staticmethod
    def calculate_all_pairs(graph: Graph) -> DijkstraTable:
        """
        Calculate shortest paths between all pairs of nodes using Dijkstra.

        Args:
            graph: The graph as an adjacency list.

        Returns:
            A DijkstraTable aggregating the distances and predecessor maps of
            every single-source run.
        """
        GraphBuilder.validate_non_negative_weights(graph)
        node_ids = GraphBuilder.node_ids(graph)
        matrix = np.full((len(node_ids), len(node_ids)), np.inf)
        all_predecessors: Dict[str, Dict[str, Optional[str]]] = {}

        for i, source in enumerate(node_ids):
            distances, predecessors = DijkstraPathFinder.calculate_single_source(graph, source, node_ids)
            matrix[i, :] = [distances[target] for target in node_ids]
            all_predecessors[source] = predecessors

        logger.debug(f"Dijkstra computed distances from {len(node_ids)} sources")
        return DijkstraTable(node_ids, matrix, all_predecessors)

    def compute(self, graph: Graph) -> DijkstraTable:
        return self.calculate_all_pairs(graph)
