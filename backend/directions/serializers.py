from rest_framework import serializers

from routing.models import (
    DEFAULT_SPACING_M,
    MAX_SPACING_M,
    MIN_SPACING_M,
    RouteRequest,
    TravelMode,
)


def _range_messages(message):
    return {"min_value": message, "max_value": message}


class DirectionsQuerySerializer(serializers.Serializer):
    """
    Validates the query string of GET /api/v1/directions/route.
    Out of range values are rejected here, before any provider is called.
    """
    start_lat = serializers.FloatField(
        min_value=-90, max_value=90,
        error_messages=_range_messages("Start latitude must be between -90 and 90"),
    )
    start_lng = serializers.FloatField(
        min_value=-180, max_value=180,
        error_messages=_range_messages("Start longitude must be between -180 and 180"),
    )
    end_lat = serializers.FloatField(
        min_value=-90, max_value=90,
        error_messages=_range_messages("End latitude must be between -90 and 90"),
    )
    end_lng = serializers.FloatField(
        min_value=-180, max_value=180,
        error_messages=_range_messages("End longitude must be between -180 and 180"),
    )
    spacing = serializers.FloatField(
        required=False, default=DEFAULT_SPACING_M,
        min_value=MIN_SPACING_M, max_value=MAX_SPACING_M,
        error_messages=_range_messages("Spacing must be between 1 and 1000 meters"),
    )
    route_type = serializers.CharField(required=False, default=TravelMode.CYCLING.value)

    def validate_route_type(self, value):
        try:
            return TravelMode.parse(value)
        except ValueError:
            choices = ", ".join(mode.value for mode in TravelMode)
            raise serializers.ValidationError(f"Route type must be one of: {choices}")

    def to_route_request(self) -> RouteRequest:
        data = self.validated_data
        return RouteRequest.new(
            start_lat=data["start_lat"],
            start_lng=data["start_lng"],
            end_lat=data["end_lat"],
            end_lng=data["end_lng"],
            spacing_m=data["spacing"],
            travel_mode=data["route_type"],
        )


class RoutePointSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()
    distance_from_start = serializers.FloatField()
    sequence_number = serializers.IntegerField()
    location = serializers.CharField(read_only=True)


class RouteResultSerializer(serializers.Serializer):
    total_distance = serializers.FloatField(source="total_distance_m")
    point_count = serializers.IntegerField()
    route_points = RoutePointSerializer(many=True)
    start_latitude = serializers.FloatField(source="start.latitude")
    start_longitude = serializers.FloatField(source="start.longitude")
    end_latitude = serializers.FloatField(source="end.latitude")
    end_longitude = serializers.FloatField(source="end.longitude")
    provider = serializers.CharField()
