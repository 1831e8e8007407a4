from typing import Dict, Optional

from delivery_router.core.graph import Graph, GraphBuilder
from delivery_router.core.types import TourResult
from delivery_router.utils.helpers import format_distance, format_route_for_display


class RouteSummaryService:
    """
    Service for calculating statistics and summaries of computed tours.
    """

    @staticmethod
    def add_statistics(result: TourResult, graph: Graph) -> TourResult:
        """
        Add statistics to the tour result.

        Args:
            result: The tour result to enrich
            graph: The graph the tour was computed on, used for per-edge weights
        """
        path_edges = []
        for from_node, to_node in zip(result.full_path, result.full_path[1:]):
            path_edges.append({
                'from': from_node,
                'to': to_node,
                'distance': GraphBuilder.edge_weight(graph, from_node, to_node),
            })

        result.statistics.update({
            'delivery_count': len(result.delivery_points),
            'tour_stops': len(result.tour),
            'path_nodes': len(result.full_path),
            'path_edges': path_edges,
            'unreachable_hop_count': len(result.unreachable_hops),
        })
        return result

    @staticmethod
    def build_summary(result: TourResult, city_names: Optional[Dict[str, str]] = None) -> str:
        """
        Human-readable description of a tour, using display names where known.
        """
        names = city_names or {}
        if not result.is_success:
            return f"Tour calculation failed: {result.error}"

        start_name = names.get(result.start, result.start)
        delivery_str = ', '.join(
            f"{node}: {names.get(node, 'Unknown')}" for node in result.delivery_points
        )
        lines = [
            "Delivery Route Information",
            f"Starting City: {start_name} (ID: {result.start})",
            f"Delivery Points: {delivery_str or 'none'}",
            f"Total Distance: {format_distance(result.total_distance)}",
            f"Route Order: {format_route_for_display(result.tour, names)}",
            f"Full Path: {format_route_for_display(result.full_path, names)}",
        ]
        if result.unreachable_hops:
            hops = ', '.join(f"{a} → {b}" for a, b in result.unreachable_hops)
            lines.append(f"Unreachable Hops (not counted): {hops}")
        return "\n".join(lines)
