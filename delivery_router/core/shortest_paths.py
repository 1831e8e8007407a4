"""
Common interface for all-pairs shortest path computations.

Two interchangeable strategies implement it: Floyd-Warshall (dense dynamic
programming with a next-hop matrix) and repeated Dijkstra (one predecessor
map per source). Both produce a ShortestPathTable.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union
import logging
import math

import numpy as np

from delivery_router.core.constants import (
    ALGORITHM_DIJKSTRA,
    ALGORITHM_FLOYD_WARSHALL,
    DEFAULT_SHORTEST_PATH_ALGORITHM,
)
from delivery_router.core.exceptions import UnknownNodeError
from delivery_router.core.graph import Graph

logger = logging.getLogger(__name__)


class ShortestPathAlgorithm(Enum):
    """Available all-pairs shortest path strategies."""
    FLOYD_WARSHALL = ALGORITHM_FLOYD_WARSHALL
    DIJKSTRA = ALGORITHM_DIJKSTRA


class ShortestPathTable(ABC):
    """
    Distance table plus the structure needed to rebuild any shortest path.

    Distances are held in a dense matrix indexed by node_ids; unreachable
    pairs hold inf.
    """

    def __init__(self, node_ids: Sequence[str], matrix: np.ndarray, algorithm: ShortestPathAlgorithm):
        self.node_ids: List[str] = list(node_ids)
        self.matrix = matrix
        self.algorithm = algorithm
        self._index: Dict[str, int] = {node: i for i, node in enumerate(self.node_ids)}

    def has_node(self, node_id: str) -> bool:
        return node_id in self._index

    def index_of(self, node_id: str) -> int:
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNodeError([node_id]) from None

    def distance(self, from_node: str, to_node: str) -> float:
        """Shortest distance between two nodes, inf if no path exists."""
        return float(self.matrix[self.index_of(from_node), self.index_of(to_node)])

    def is_reachable(self, from_node: str, to_node: str) -> bool:
        return math.isfinite(self.distance(from_node, to_node))

    @abstractmethod
    def path(self, from_node: str, to_node: str) -> Optional[List[str]]:
        """
        Rebuild the shortest path between two nodes.

        Returns:
            The node sequence from from_node to to_node, or None if no path exists.
        """

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Distance table as nested dictionaries {source: {target: distance}}."""
        return {
            source: {
                target: float(self.matrix[i, j])
                for j, target in enumerate(self.node_ids)
            }
            for i, source in enumerate(self.node_ids)
        }


class AllPairsShortestPathFinder(ABC):
    """Abstract base class for all-pairs shortest path strategies."""

    @property
    @abstractmethod
    def algorithm(self) -> ShortestPathAlgorithm:
        """Return the algorithm type."""

    @abstractmethod
    def compute(self, graph: Graph) -> ShortestPathTable:
        """
        Compute shortest distances and reconstructible paths for every node pair.

        Args:
            graph: The graph as an adjacency mapping.

        Returns:
            A ShortestPathTable covering every node of the graph.
        """


def get_path_finder(
    algorithm: Union[str, ShortestPathAlgorithm, None] = None
) -> AllPairsShortestPathFinder:
    """
    Create the path finder for the requested strategy.

    Args:
        algorithm: Algorithm name or enum member. Defaults to
            DEFAULT_SHORTEST_PATH_ALGORITHM.

    Raises:
        ValueError: If the algorithm is not recognised.
    """
    from delivery_router.core.dijkstra import DijkstraPathFinder
    from delivery_router.core.floyd_warshall import FloydWarshallPathFinder

    if algorithm is None:
        algorithm = DEFAULT_SHORTEST_PATH_ALGORITHM
    if isinstance(algorithm, str):
        try:
            algorithm = ShortestPathAlgorithm(algorithm.strip().lower())
        except ValueError:
            valid = ', '.join(a.value for a in ShortestPathAlgorithm)
            raise ValueError(
                f"Unknown shortest path algorithm '{algorithm}'. Expected one of: {valid}"
            ) from None

    if algorithm is ShortestPathAlgorithm.DIJKSTRA:
        return DijkstraPathFinder()
    return FloydWarshallPathFinder()
