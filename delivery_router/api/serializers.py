"""
Serializers for the delivery router API.

This module provides serializers for converting between API requests/responses
and the internal data structures used by the delivery router.
"""
import logging
from rest_framework import serializers

from delivery_router.core.constants import ALGORITHM_DIJKSTRA, ALGORITHM_FLOYD_WARSHALL, STATUS_ERROR, STATUS_SUCCESS

logger = logging.getLogger(__name__)


class TourQuerySerializer(serializers.Serializer):
    """Serializer for the query parameters of a tour request."""
    startCity = serializers.CharField(max_length=100, help_text="ID of the city the tour starts and ends at.")
    deliveryPoints = serializers.CharField(
        required=False, allow_blank=True, default='',
        help_text='JSON list of delivery city IDs, e.g. ["2", "5"]. Malformed values are treated as an empty list.'
    )
    algorithm = serializers.ChoiceField(
        choices=[ALGORITHM_FLOYD_WARSHALL, ALGORITHM_DIJKSTRA], required=False,
        help_text="All-pairs shortest path algorithm. Defaults to the configured algorithm."
    )

    def validate_startCity(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("startCity must not be blank.")
        return value


class RouteSegmentSerializer(serializers.Serializer):
    """Serializer for the shortest-path segment between two tour stops."""
    from_location = serializers.CharField()
    to_location = serializers.CharField()
    path = serializers.ListField(child=serializers.CharField())
    distance = serializers.FloatField()


class TourResponseSerializer(serializers.Serializer):
    """Serializer for tour calculation responses."""
    status = serializers.ChoiceField(choices=[STATUS_SUCCESS, STATUS_ERROR])
    start = serializers.CharField(allow_null=True)
    delivery_points = serializers.ListField(child=serializers.CharField())
    tour = serializers.ListField(child=serializers.CharField(), help_text="Ordered stops, starting and ending at start.")
    full_path = serializers.ListField(child=serializers.CharField(), help_text="Tour expanded with intermediate cities.")
    total_distance = serializers.FloatField()
    algorithm = serializers.CharField(allow_null=True)
    segments = RouteSegmentSerializer(many=True)
    unreachable_hops = serializers.ListField(
        child=serializers.ListField(child=serializers.CharField(), min_length=2, max_length=2)
    )
    error = serializers.CharField(allow_null=True, required=False)
    statistics = serializers.DictField(required=False)
    summary = serializers.CharField(required=False, allow_blank=True)
    names = serializers.DictField(child=serializers.CharField(), required=False)

    def validate(self, data):
        if data['status'] == STATUS_SUCCESS:
            tour = data['tour']
            if len(tour) < 2 or tour[0] != data['start'] or tour[-1] != data['start']:
                raise serializers.ValidationError("A successful tour must start and end at the start city.")
        return data
