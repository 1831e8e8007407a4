import logging
from typing import Any, List, Optional, Sequence

from delivery_router.core.constants import (
    DEFAULT_UNREACHABLE_POLICY,
    STATUS_SUCCESS,
    UNREACHABLE_POLICIES,
    UNREACHABLE_POLICY_FAIL,
)
from delivery_router.core.exceptions import (
    DeliveryRouterError,
    UnknownNodeError,
    UnreachableTourError,
)
from delivery_router.core.graph import Graph, GraphBuilder, normalize_node_id
from delivery_router.core.shortest_paths import AllPairsShortestPathFinder, get_path_finder
from delivery_router.core.tour import NearestNeighborTourBuilder, TourAssembler
from delivery_router.core.types import TourResult, validate_tour

logger = logging.getLogger(__name__)


class DeliveryTourService:
    def __init__(
        self,
        path_finder: Optional[AllPairsShortestPathFinder] = None,
        unreachable_policy: str = DEFAULT_UNREACHABLE_POLICY
    ):
        """
        Initialize the delivery tour service.

        Args:
            path_finder: The all-pairs shortest path strategy. If None, the
                default strategy from get_path_finder() is used.
            unreachable_policy: 'skip' to ignore hops without a path, 'fail'
                to report such tours as errors.
        """
        if unreachable_policy not in UNREACHABLE_POLICIES:
            raise ValueError(
                f"Unknown unreachable policy '{unreachable_policy}'. "
                f"Expected one of: {', '.join(UNREACHABLE_POLICIES)}"
            )
        self.path_finder = path_finder or get_path_finder()
        self.unreachable_policy = unreachable_policy

    @staticmethod
    def validate_nodes(graph: Graph, start: str, delivery_points: Sequence[str]) -> None:
        """
        Check that the start node and every delivery point exist in the graph.

        Raises:
            UnknownNodeError: Listing every identifier missing from the graph.
        """
        unknown = GraphBuilder.find_unknown_nodes(graph, [start, *delivery_points])
        if unknown:
            raise UnknownNodeError(unknown)

    def plan_tour(self, graph: Graph, start: Any, delivery_points: Sequence[Any]) -> TourResult:
        """
        Compute a nearest-neighbor delivery tour and its full path.

        Args:
            graph: The city graph.
            start: Start node identifier; the tour returns here.
            delivery_points: Node identifiers to visit once each.

        Returns:
            A TourResult with status 'success', or status 'error' and a message
            when the input is invalid or (with the 'fail' policy) a hop is
            unreachable.
        """
        algorithm = self.path_finder.algorithm.value
        try:
            start = normalize_node_id(start)
            points: List[str] = [normalize_node_id(point) for point in delivery_points]
        except ValueError as e:
            logger.error(f"Invalid node identifier in tour request: {e}")
            return TourResult.error_result(str(e), algorithm=algorithm)

        try:
            self.validate_nodes(graph, start, points)

            table = self.path_finder.compute(graph)
            tour = NearestNeighborTourBuilder.build(start, table, [start, *points])
            validate_tour(tour, start, points)
            assembled = TourAssembler.assemble(tour, table)

            if assembled.unreachable_hops:
                logger.warning(
                    f"Tour from '{start}' has {len(assembled.unreachable_hops)} unreachable hop(s): "
                    f"{assembled.unreachable_hops}"
                )
                if self.unreachable_policy == UNREACHABLE_POLICY_FAIL:
                    raise UnreachableTourError(assembled.unreachable_hops)
        except DeliveryRouterError as e:
            logger.error(f"Tour calculation failed: {e}")
            return TourResult.error_result(str(e), start=start, delivery_points=points, algorithm=algorithm)

        logger.info(
            f"Computed {algorithm} tour from '{start}' over {len(points)} delivery point(s): "
            f"total distance {assembled.total_distance}"
        )
        return TourResult(
            status=STATUS_SUCCESS,
            start=start,
            delivery_points=points,
            tour=tour,
            full_path=assembled.full_path,
            total_distance=assembled.total_distance,
            algorithm=algorithm,
            segments=assembled.segments,
            unreachable_hops=assembled.unreachable_hops,
        )
