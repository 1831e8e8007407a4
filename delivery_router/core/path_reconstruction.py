"""
Path reconstruction from compact shortest-path structures.
"""
from typing import Dict, List, Mapping, Optional, Sequence
import logging

import numpy as np

from delivery_router.core.constants import NO_NEXT_HOP

logger = logging.getLogger(__name__)


def reconstruct_path_from_next_hops(
    start: str,
    end: str,
    next_hops: np.ndarray,
    node_ids: Sequence[str],
    index: Optional[Mapping[str, int]] = None
) -> Optional[List[str]]:
    """
    Rebuild a path by following the "next hop from i toward j" matrix.

    Args:
        start: First node of the path.
        end: Last node of the path.
        next_hops: Matrix where next_hops[i, j] is the index of the node that
            follows i on the shortest path to j, or NO_NEXT_HOP.
        node_ids: Node IDs corresponding to matrix indices.
        index: Optional precomputed mapping from node ID to matrix index.

    Returns:
        The node sequence from start to end, or None if no path exists.
    """
    if start == end:
        return [start]

    if index is None:
        index = {node: i for i, node in enumerate(node_ids)}
    current, target = index[start], index[end]

    if next_hops[current, target] == NO_NEXT_HOP:
        return None

    path = [start]
    while current != target:
        current = int(next_hops[current, target])
        # A valid path never revisits a node, so it holds at most len(node_ids) entries
        if current == NO_NEXT_HOP or len(path) >= len(node_ids):
            logger.error(f"Path reconstruction error from {start} to {end}: broken next-hop chain {path}")
            return None
        path.append(node_ids[current])

    return path


def reconstruct_path_from_predecessors(
    start: str,
    end: str,
    predecessors: Dict[str, Optional[str]]
) -> Optional[List[str]]:
    """
    Rebuild a path by walking predecessors back from the end node.

    Args:
        start: Source node of the single-source run that produced predecessors.
        end: Last node of the path.
        predecessors: Mapping node -> previous node on its shortest path from start.

    Returns:
        The node sequence from start to end, or None if no path exists.
    """
    if start == end:
        return [start]

    if predecessors.get(end) is None:
        return None

    path = [end]
    current = end
    while current != start:
        current = predecessors.get(current)
        if current is None or len(path) >= len(predecessors):
            logger.error(f"Path reconstruction error from {start} to {end}: broken predecessor chain {path}")
            return None
        path.append(current)

    path.reverse()
    return path
