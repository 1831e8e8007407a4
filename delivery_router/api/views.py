"""
API views for the delivery router.

This module provides the API endpoints for the delivery tour functionality.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.decorators import api_view
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
import logging

from delivery_router.core.exceptions import GraphFormatError
from delivery_router.core.shortest_paths import get_path_finder
from delivery_router.services.graph_loader_service import GraphLoaderService
from delivery_router.services.route_summary_service import RouteSummaryService
from delivery_router.services.tour_service import DeliveryTourService
from delivery_router.settings import get_router_setting
from delivery_router.utils.helpers import parse_delivery_points
from delivery_router.api.serializers import TourQuerySerializer, TourResponseSerializer

# Set up logging
logger = logging.getLogger(__name__)


class DeliveryTourView(APIView):
    """
    API view for computing a delivery tour over the configured city graph.
    """

    @swagger_auto_schema(
        query_serializer=TourQuerySerializer,
        responses={
            200: TourResponseSerializer,
            400: openapi.Response("Bad Request - Invalid query, unknown city or unreachable tour."),
            404: openapi.Response("Not Found - Graph data file is missing."),
            500: openapi.Response("Internal Server Error - Tour calculation failed.")
        },
        operation_id="delivery_tour_read",
        operation_description="""Computes a closed delivery tour from startCity through every delivery point
        using a nearest-neighbor heuristic on all-pairs shortest paths, and expands it into the full city path.""",
        tags=['Delivery Tour']
    )
    def get(self, request, format=None):
        """
        GET endpoint for tour calculation.

        Args:
            request: HTTP request object with startCity, deliveryPoints and algorithm query parameters.
            format: Format of the response.

        Returns:
            Response object with the tour, full path, total distance and summary.
        """
        serializer = TourQuerySerializer(data=request.query_params)

        if not serializer.is_valid():
            logger.error(f"DeliveryTourView validation error: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        start = serializer.validated_data['startCity']
        delivery_points = parse_delivery_points(serializer.validated_data.get('deliveryPoints'))
        algorithm = serializer.validated_data.get('algorithm') or get_router_setting('ROUTER_SHORTEST_PATH_ALGORITHM')
        logger.debug(f"Tour request: start={start}, delivery_points={delivery_points}, algorithm={algorithm}")

        graph_file = get_router_setting('ROUTER_GRAPH_FILE')
        try:
            graph = GraphLoaderService.load_graph(graph_file)
        except FileNotFoundError:
            logger.error(f"Graph file not found: {graph_file}")
            return Response({"error": "Graph data is not available."}, status=status.HTTP_404_NOT_FOUND)
        except GraphFormatError as e:
            logger.error(f"Graph file {graph_file} is malformed: {e}")
            return Response({"error": f"Graph data is malformed: {e}"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Could not read graph file %s: %s", graph_file, str(e))
            return Response(
                {"error": "Graph data could not be read. Please try again later."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        try:
            city_names = GraphLoaderService.load_city_names(get_router_setting('ROUTER_CITY_NAMES_FILE'))
            service = DeliveryTourService(
                path_finder=get_path_finder(algorithm),
                unreachable_policy=get_router_setting('ROUTER_UNREACHABLE_POLICY')
            )
            result = service.plan_tour(graph, start, delivery_points)

            if not result.is_success:
                return Response(result.to_dict(), status=status.HTTP_400_BAD_REQUEST)

            RouteSummaryService.add_statistics(result, graph)
            response_data = {
                **result.to_dict(),
                "summary": RouteSummaryService.build_summary(result, city_names),
                "names": {node: city_names.get(node, node) for node in dict.fromkeys(result.tour + result.full_path)},
            }
            response_serializer = TourResponseSerializer(data=response_data)
            if not response_serializer.is_valid():
                logger.error(f"DeliveryTourView response serialization error: {response_serializer.errors}")
                return Response(response_serializer.errors, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

            return Response(response_serializer.data, status=status.HTTP_200_OK)

        except Exception as e:
            logger.exception("Critical error during tour calculation: %s", str(e))
            return Response(
                {"error": "An unexpected error occurred during tour calculation. Please try again later."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@swagger_auto_schema(
    method='get',
    responses={200: openapi.Response("Service is healthy.")},
    operation_id="health_check_get",
    tags=['Health']
)
@api_view(['GET'])
def health_check(request):
    """
    Health check endpoint to verify the API is running.

    Args:
        request: HTTP request object.

    Returns:
        Response object with health status.
    """
    return Response({"status": "healthy"}, status=status.HTTP_200_OK)
