"""
Core data types for the delivery router.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Optional, Any, Sequence
import logging

from delivery_router.core.constants import STATUS_ERROR, STATUS_SUCCESS

logger = logging.getLogger(__name__)


@dataclass
class RouteSegment:
    """Represents the shortest-path segment between two consecutive tour stops."""
    from_location: str
    to_location: str
    path: List[str]
    distance: float


@dataclass
class AssembledTour:
    """Full path and distance information stitched together from a tour."""
    full_path: List[str] = field(default_factory=list)
    total_distance: float = 0.0
    segments: List[RouteSegment] = field(default_factory=list)
    unreachable_hops: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class TourResult:
    """Data Transfer Object representing the outcome of a tour calculation."""
    status: str
    start: Optional[str] = None
    delivery_points: List[str] = field(default_factory=list)
    tour: List[str] = field(default_factory=list)
    full_path: List[str] = field(default_factory=list)
    total_distance: float = 0.0
    algorithm: Optional[str] = None
    segments: List[RouteSegment] = field(default_factory=list)
    unreachable_hops: List[Tuple[str, str]] = field(default_factory=list)
    error: Optional[str] = None
    statistics: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @classmethod
    def error_result(
        cls,
        message: str,
        start: Optional[str] = None,
        delivery_points: Optional[List[str]] = None,
        algorithm: Optional[str] = None
    ) -> 'TourResult':
        """Build a failed result carrying the error message."""
        return cls(
            status=STATUS_ERROR,
            start=start,
            delivery_points=list(delivery_points or []),
            algorithm=algorithm,
            error=message,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary (tuples become lists)."""
        return {
            'status': self.status,
            'start': self.start,
            'delivery_points': list(self.delivery_points),
            'tour': list(self.tour),
            'full_path': list(self.full_path),
            'total_distance': self.total_distance,
            'algorithm': self.algorithm,
            'segments': [
                {
                    'from_location': segment.from_location,
                    'to_location': segment.to_location,
                    'path': list(segment.path),
                    'distance': segment.distance,
                }
                for segment in self.segments
            ],
            'unreachable_hops': [list(hop) for hop in self.unreachable_hops],
            'error': self.error,
            'statistics': dict(self.statistics),
        }

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> 'TourResult':
        """
        Creates a TourResult instance from a dictionary.
        Handles None input and provides default values for missing keys.
        """
        if data is None:
            logger.warning("Attempted to create TourResult from None data.")
            return TourResult.error_result('Input data for TourResult was None')

        try:
            return TourResult(
                status=data.get('status', 'unknown'),
                start=data.get('start'),
                delivery_points=list(data.get('delivery_points', [])),
                tour=list(data.get('tour', [])),
                full_path=list(data.get('full_path', [])),
                total_distance=data.get('total_distance', 0.0),
                algorithm=data.get('algorithm'),
                segments=[
                    RouteSegment(**segment) for segment in data.get('segments', [])
                ],
                unreachable_hops=[tuple(hop) for hop in data.get('unreachable_hops', [])],
                error=data.get('error'),
                statistics=data.get('statistics', {}),
            )
        except (AttributeError, TypeError) as e:
            logger.error(f"Failed to convert dictionary to TourResult: {e}", exc_info=True)
            return TourResult.error_result(f"Conversion error from dict: {str(e)}")


def validate_tour(tour: Sequence[str], start: str, delivery_points: Sequence[str]) -> bool:
    """
    Validate the structure of a closed delivery tour.

    Args:
        tour: The tour to validate.
        start: The node the tour must start and end at.
        delivery_points: Nodes that must each be visited exactly once.

    Returns:
        True if the tour is valid.

    Raises:
        ValueError: If the tour is invalid with a specific message.
    """
    if len(tour) < 2:
        raise ValueError(f"Tour must contain at least two entries, got {len(tour)}")

    if tour[0] != start or tour[-1] != start:
        raise ValueError(f"Tour must start and end at '{start}': {list(tour)}")

    required = [node for node in dict.fromkeys(delivery_points) if node != start]
    inner = list(tour[1:-1])

    if len(inner) != len(required):
        raise ValueError(
            f"Tour visits {len(inner)} stops but {len(required)} delivery points were requested"
        )

    for node in required:
        visits = inner.count(node)
        if visits != 1:
            raise ValueError(f"Delivery point '{node}' visited {visits} times, expected exactly once")

    return True
