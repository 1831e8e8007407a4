"""
Tour construction and assembly.

NearestNeighborTourBuilder orders the delivery points into a closed tour;
TourAssembler expands that tour into the full node path and its distance.
"""
from typing import List, Sequence
import logging
import math

from delivery_router.core.shortest_paths import ShortestPathTable
from delivery_router.core.types import AssembledTour, RouteSegment

logger = logging.getLogger(__name__)


class NearestNeighborTourBuilder:
    """
    Greedy tour construction: always extend to the closest unvisited node.
    """

    @staticmethod
    def build(start: str, table: ShortestPathTable, nodes: Sequence[str]) -> List[str]:
        """
        Build a closed tour from start through every node in nodes.

        Ties, including the case where every remaining node is unreachable,
        go to the node listed first in nodes. Unreachable nodes are still
        visited; the tour does not skip them.

        Args:
            start: Node the tour starts and ends at.
            table: Shortest path table providing distances.
            nodes: Nodes to visit. May include start; duplicates are ignored.

        Returns:
            The tour, beginning and ending with start.
        """
        unvisited = [node for node in dict.fromkeys(nodes) if node != start]
        tour = [start]
        current = start

        while unvisited:
            # min() keeps the first of equal candidates, so list order breaks ties
            nearest = min(unvisited, key=lambda node: table.distance(current, node))
            tour.append(nearest)
            unvisited.remove(nearest)
            current = nearest

        # Close the loop
        tour.append(start)
        return tour


class TourAssembler:
    """
    Stitches per-hop shortest paths into one continuous route.
    """

    @staticmethod
    def total_distance(tour: Sequence[str], table: ShortestPathTable) -> float:
        """Sum of hop distances; hops without a path add nothing."""
        total = 0.0
        for from_node, to_node in zip(tour, tour[1:]):
            distance = table.distance(from_node, to_node)
            if math.isfinite(distance):
                total += distance
        return total

    @staticmethod
    def assemble(tour: Sequence[str], table: ShortestPathTable) -> AssembledTour:
        """
        Expand a tour into its full path and total distance.

        Each segment contributes all of its nodes except the last, then the
        tour's final node is appended once. The total is total_distance(), so
        a hop with an infinite distance adds nothing and is reported in
        unreachable_hops.

        Args:
            tour: The closed tour.
            table: Shortest path table used for distances and paths.

        Returns:
            AssembledTour with the full path, total distance, segments and
            unreachable hops.
        """
        assembled = AssembledTour(total_distance=TourAssembler.total_distance(tour, table))

        for from_node, to_node in zip(tour, tour[1:]):
            distance = table.distance(from_node, to_node)
            if not math.isfinite(distance):
                logger.warning(f"No path from '{from_node}' to '{to_node}'; hop skipped")
                assembled.unreachable_hops.append((from_node, to_node))
                continue

            segment_path = table.path(from_node, to_node)
            if segment_path is None:
                # The distance still counts; only the node sequence is missing
                logger.error(f"Could not rebuild the path from '{from_node}' to '{to_node}' (distance {distance})")
                continue

            assembled.full_path.extend(segment_path[:-1])
            assembled.segments.append(RouteSegment(
                from_location=from_node,
                to_location=to_node,
                path=segment_path,
                distance=distance
            ))

        if tour:
            assembled.full_path.append(tour[-1])

        return assembled
