"""
Graph model utilities for the delivery router.

The graph is an undirected weighted adjacency mapping with the format
{node1: {node2: weight, ...}, ...}. Every node identifier is a string.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging
import math
import re

import numpy as np

from delivery_router.core.exceptions import GraphFormatError

logger = logging.getLogger(__name__)

Graph = Dict[str, Dict[str, float]]

# Decimal spellings of whole numbers, e.g. "3.0" or "-12.00"
_INTEGRAL_DECIMAL = re.compile(r"^([+-]?\d+)\.0+$")


def normalize_node_id(node_id: Any) -> str:
    """
    Convert a node identifier to its canonical string form.

    Integers and integral floats (e.g. 3 or 3.0) become '3'; strings are
    stripped of surrounding whitespace, and a string spelling a whole number
    with a zero fraction ("3.0") is treated like the float, so an id reads
    the same whether it arrived as JSON number or as text.

    Raises:
        ValueError: If the identifier is None or empty.
    """
    if isinstance(node_id, bool) or not isinstance(node_id, (str, int, float)):
        raise ValueError(f"Invalid node identifier: {node_id!r}")
    if isinstance(node_id, float) and node_id.is_integer():
        node_id = int(node_id)
    normalized = str(node_id).strip()
    if not normalized:
        raise ValueError("Node identifier must not be empty")
    match = _INTEGRAL_DECIMAL.match(normalized)
    if match:
        normalized = str(int(match.group(1)))
    return normalized


class GraphBuilder:
    """
    Builder class for creating and inspecting city graphs.
    """

    @staticmethod
    def from_edges(
        edges: Iterable[Tuple[Any, Any, float]],
        nodes: Optional[Iterable[Any]] = None
    ) -> Graph:
        """
        Build a symmetric graph from (city_a, city_b, weight) triples.

        Args:
            edges: Iterable of edges. A repeated edge keeps its last weight.
            nodes: Optional extra node identifiers, allowing isolated nodes.

        Returns:
            Dictionary representing the undirected graph.

        Raises:
            GraphFormatError: If a weight is negative or not a finite number.
        """
        graph: Graph = {}
        for node in nodes or []:
            graph.setdefault(normalize_node_id(node), {})

        for city_a, city_b, weight in edges:
            a = normalize_node_id(city_a)
            b = normalize_node_id(city_b)
            weight = GraphBuilder._coerce_weight(weight)
            graph.setdefault(a, {})[b] = weight
            graph.setdefault(b, {})[a] = weight

        return graph

    @staticmethod
    def parse_edge_list(text: str) -> Graph:
        """
        Parse a line-oriented edge list into a graph.

        Each line holds "cityA cityB weight", whitespace-delimited. Blank lines
        and lines starting with '#' are ignored.

        Raises:
            GraphFormatError: If a line does not hold exactly three fields or the
                weight is not a nonnegative number.
        """
        edges = []
        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith('#'):
                continue

            parts = line.split()
            if len(parts) != 3:
                raise GraphFormatError(
                    f"Expected 'cityA cityB weight', got {len(parts)} field(s): {line!r}",
                    line_number
                )

            city_a, city_b, raw_weight = parts
            try:
                weight = GraphBuilder._coerce_weight(raw_weight)
            except GraphFormatError as e:
                raise GraphFormatError(str(e), line_number) from None
            edges.append((city_a, city_b, weight))

        graph = GraphBuilder.from_edges(edges)
        logger.debug(f"Parsed edge list with {len(edges)} edges and {len(graph)} nodes")
        return graph

    @staticmethod
    def _coerce_weight(weight: Any) -> float:
        try:
            value = float(weight)
        except (TypeError, ValueError):
            raise GraphFormatError(f"Edge weight is not a number: {weight!r}") from None
        if not math.isfinite(value):
            raise GraphFormatError(f"Edge weight must be finite, got {weight!r}")
        if value < 0:
            raise GraphFormatError(f"Negative edge weight {value} is not allowed")
        return value

    @staticmethod
    def validate_non_negative_weights(graph: Graph) -> None:
        """
        Ensure all weights in the graph are non-negative.

        Raises:
            GraphFormatError: If a negative edge weight is found.
        """
        for src, neighbors in graph.items():
            for dest, weight in neighbors.items():
                if weight < 0:
                    raise GraphFormatError(
                        f"Negative weight detected from '{src}' to '{dest}' with weight {weight}"
                    )

    @staticmethod
    def node_ids(graph: Graph) -> List[str]:
        """
        List every node of the graph in a stable order.

        Keys come first in insertion order, followed by nodes that only appear
        as neighbors, in first-seen order.
        """
        ordered = dict.fromkeys(graph)
        for neighbors in graph.values():
            for neighbor in neighbors:
                if neighbor not in ordered:
                    ordered[neighbor] = None
        return list(ordered)

    @staticmethod
    def find_unknown_nodes(graph: Graph, node_ids: Iterable[str]) -> List[str]:
        """Return the identifiers (deduplicated, in order) that are not graph nodes."""
        known = set(GraphBuilder.node_ids(graph))
        return [node for node in dict.fromkeys(node_ids) if node not in known]

    @staticmethod
    def edge_weight(graph: Graph, from_node: str, to_node: str) -> Optional[float]:
        """Weight of the direct edge between two nodes, or None if not adjacent."""
        return graph.get(from_node, {}).get(to_node)

    @staticmethod
    def graph_to_matrix(graph: Graph) -> Tuple[np.ndarray, List[str]]:
        """
        Convert a graph to a dense weight matrix.

        Returns:
            Tuple containing:
            - matrix: 2D numpy array, 0 on the diagonal, edge weight for adjacent
              pairs and inf elsewhere.
            - node_ids: List of node IDs corresponding to matrix indices.
        """
        node_ids = GraphBuilder.node_ids(graph)
        index = {node: i for i, node in enumerate(node_ids)}
        matrix = np.full((len(node_ids), len(node_ids)), np.inf)

        for src, neighbors in graph.items():
            for dest, weight in neighbors.items():
                matrix[index[src], index[dest]] = weight

        # Self-loops never shorten a path
        np.fill_diagonal(matrix, 0.0)
        return matrix, node_ids
