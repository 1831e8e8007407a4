"""
Exceptions raised by the delivery router core.
"""
from typing import Iterable, List, Optional, Tuple


class DeliveryRouterError(Exception):
    """Base class for all delivery router errors."""


class GraphFormatError(DeliveryRouterError, ValueError):
    """Raised when graph data is malformed (bad edge line, negative weight, ...)."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class UnknownNodeError(DeliveryRouterError, LookupError):
    """Raised when a start or delivery node is not present in the graph."""

    def __init__(self, node_ids: Iterable[str]):
        self.node_ids: List[str] = list(node_ids)
        super().__init__(
            f"Unknown node(s) not present in graph: {', '.join(self.node_ids)}"
        )


class UnreachableTourError(DeliveryRouterError):
    """Raised when a tour contains hops with no path between their endpoints."""

    def __init__(self, hops: Iterable[Tuple[str, str]]):
        self.hops: List[Tuple[str, str]] = list(hops)
        hops_str = ', '.join(f"{a}->{b}" for a, b in self.hops)
        super().__init__(f"Tour contains unreachable hop(s): {hops_str}")
