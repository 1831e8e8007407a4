"""
Helper functions for the delivery router module.

This module provides various utility functions used across the delivery router.
"""
import json
import logging
import math
from typing import Any, Dict, List, Optional

from delivery_router.core.constants import DISTANCE_UNIT
from delivery_router.core.graph import Graph, normalize_node_id

# Set up logging
logger = logging.getLogger(__name__)


def parse_delivery_points(raw_value: Optional[str]) -> List[str]:
    """
    Parse a JSON list of delivery point identifiers.

    Identifiers are normalized to strings. Missing or malformed input yields
    an empty list and a logged warning rather than an error.

    Args:
        raw_value: JSON text such as '["2", 3]'.

    Returns:
        List of normalized node identifiers.
    """
    if raw_value is None or not str(raw_value).strip():
        return []

    try:
        parsed = json.loads(raw_value)
        if not isinstance(parsed, list):
            raise ValueError(f"Expected a JSON list, got {type(parsed).__name__}")
        return [normalize_node_id(item) for item in parsed]
    except ValueError as e:
        logger.warning(f"Error parsing delivery points {raw_value!r}: {e}. Using an empty list.")
        return []


def format_route_for_display(route: List[str], location_names: Dict[str, str]) -> str:
    """
    Format a route for display, converting location IDs to names.

    Args:
        route: List of location IDs in the route.
        location_names: Dictionary mapping location IDs to names.

    Returns:
        Formatted route string.
    """
    route_with_names = [f"{location_names.get(loc_id, loc_id)} ({loc_id})" for loc_id in route]
    return " → ".join(route_with_names)


def format_distance(distance: float) -> str:
    return f"{distance:g} {DISTANCE_UNIT}"


def detect_isolated_nodes(graph: Graph) -> List[str]:
    """
    Detect nodes in the graph that have no incident edges.

    Args:
        graph: Dictionary representing the graph with format:
              {node1: {node2: distance, ...}, ...}

    Returns:
        List of isolated node IDs.
    """
    return [
        node for node, neighbors in graph.items()
        if not any(neighbor != node for neighbor in neighbors)
    ]


def safe_json_dumps(data: Any) -> str:
    """
    Serialize data to JSON, converting tuples to lists and non-finite floats to None.
    """
    def _clean(value):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if isinstance(value, dict):
            return {str(k): _clean(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [_clean(v) for v in value]
        return value

    return json.dumps(_clean(data), indent=2, ensure_ascii=False)
