import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from routing import InvalidInput, RoutingServiceOptions, build_route_sources, compute_route
from .serializers import DirectionsQuerySerializer, RouteResultSerializer

logger = logging.getLogger(__name__)


class DirectionsRouteView(APIView):
    """
    GET route points between two coordinates with configurable spacing.
    - Uses OpenRouteService when an API key is configured
    - Otherwise OSRM, and a straight line when no provider answers
    """

    def get(self, request):
        query = DirectionsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        route_request = query.to_route_request()

        logger.info(
            f"Calculating {route_request.travel_mode.value} route from "
            f"({route_request.start.latitude}, {route_request.start.longitude}) to "
            f"({route_request.end.latitude}, {route_request.end.longitude}) "
            f"with {route_request.spacing_m}m spacing"
        )

        try:
            sources = build_route_sources(RoutingServiceOptions.from_env())
            result = compute_route(route_request, sources)
        except InvalidInput as e:
            return Response({e.field: [e.message]}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("Error calculating directions")
            return Response(
                {"detail": "An error occurred while calculating directions"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.info(
            f"Route calculated successfully with {result.point_count} points "
            f"over {result.total_distance_m:.2f} meters ({result.provider})"
        )
        return Response(RouteResultSerializer(result).data)
