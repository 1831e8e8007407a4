"""
Floyd-Warshall all-pairs shortest paths with next-hop path reconstruction.
"""
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from delivery_router.core.constants import NO_NEXT_HOP
from delivery_router.core.graph import Graph, GraphBuilder
from delivery_router.core.path_reconstruction import reconstruct_path_from_next_hops
from delivery_router.core.shortest_paths import (
    AllPairsShortestPathFinder,
    ShortestPathAlgorithm,
    ShortestPathTable,
)

logger = logging.getLogger(__name__)


class FloydWarshallTable(ShortestPathTable):
    """Distance matrix plus the "next hop from i toward j" matrix."""

    def __init__(self, node_ids: Sequence[str], matrix: np.ndarray, next_hops: np.ndarray):
        super().__init__(node_ids, matrix, ShortestPathAlgorithm.FLOYD_WARSHALL)
        self.next_hops = next_hops

    def path(self, from_node: str, to_node: str) -> Optional[List[str]]:
        self.index_of(from_node)
        self.index_of(to_node)
        return reconstruct_path_from_next_hops(
            from_node, to_node, self.next_hops, self.node_ids, self._index
        )


class FloydWarshallPathFinder(AllPairsShortestPathFinder):
    """
    Dense dynamic programming over every intermediate node.

    For each intermediate node k, every pair (i, j) is relaxed with
    dist[i][k] + dist[k][j]; when that is strictly shorter, the next hop from
    i toward j becomes the next hop from i toward k. O(n^3) in node count.
    """

    @property
    def algorithm(self) -> ShortestPathAlgorithm:
        return ShortestPathAlgorithm.FLOYD_WARSHALL

    @staticmethod
    def calculate_distance_and_next_hops(graph: Graph) -> Tuple[np.ndarray, np.ndarray, List[str]]:
        """
        Run Floyd-Warshall on the graph.

        Args:
            graph: The graph as an adjacency mapping.

        Returns:
            Tuple containing:
            - dist: 2D numpy array of shortest distances (inf when unreachable).
            - next_hops: 2D int array of next-hop indices (NO_NEXT_HOP when undefined).
            - node_ids: List of node IDs corresponding to matrix indices.
        """
        GraphBuilder.validate_non_negative_weights(graph)
        dist, node_ids = GraphBuilder.graph_to_matrix(graph)
        n = len(node_ids)

        next_hops = np.full((n, n), NO_NEXT_HOP, dtype=int)
        adjacent = np.isfinite(dist)
        np.fill_diagonal(adjacent, False)
        columns = np.broadcast_to(np.arange(n), (n, n))
        next_hops[adjacent] = columns[adjacent]

        # Row k and column k do not change while k is the intermediate node,
        # so each round can relax all pairs at once.
        for k in range(n):
            via_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
            improved = via_k < dist
            if improved.any():
                dist = np.where(improved, via_k, dist)
                next_hops = np.where(improved, next_hops[:, k, np.newaxis], next_hops)

        return dist, next_hops, node_ids

    def compute(self, graph: Graph) -> FloydWarshallTable:
        dist, next_hops, node_ids = self.calculate_distance_and_next_hops(graph)
        logger.debug(f"Floyd-Warshall computed distances for {len(node_ids)} nodes")
        return FloydWarshallTable(node_ids, dist, next_hops)
