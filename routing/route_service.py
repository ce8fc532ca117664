#Purpose: Route computation for downstream use (the directions pipeline).
#Returns the evenly spaced route points needed by:
#map display
#distance markers along the route
#Walks the route sources in priority order, resamples the first polyline,
#otherwise falls back to a straight line between the two endpoints.
#Provider failures are absorbed by the sources; anything else propagates.

import logging
from typing import Optional, Sequence

from .errors import InvalidRouteData
from .geodesy import distance
from .models import RouteRequest, RouteResult
from .resampler import resample_polyline
from .route_sources import NoRouteSource, RouteSource
from .straight_line import straight_line_points

logger = logging.getLogger(__name__)

STRAIGHT_LINE = "straight_line"


def compute_route(request: RouteRequest,
                  sources: Optional[Sequence[RouteSource]] = None) -> RouteResult:
    """
    Compute evenly spaced points from request.start to request.end.

    Args:
        request: validated RouteRequest (validate() is called again here)
        sources: ordered route sources, None means no provider at all

    Returns:
        RouteResult from the first source that produced a polyline, or from
        the straight-line fallback.

    Raises:
        InvalidInput: request fields out of range (before any provider call)
    """
    request.validate()

    if sources is None:
        sources = [NoRouteSource()]

    for source in sources:
        provider_route = source.fetch(request)
        if provider_route is None:
            continue

        # custom sources may hand back a ProviderRoute that skipped build_provider_route
        try:
            points = resample_polyline(
                provider_route.polyline, provider_route.total_distance_m, request.spacing_m
            )
        except InvalidRouteData as e:
            logger.warning(f"{source.name} returned unusable route data, trying next source: {e.reason}")
            continue

        logger.info(
            f"Resampled {provider_route.provider} route: {len(provider_route.polyline)} vertices -> "
            f"{len(points)} points over {provider_route.total_distance_m:.2f}m"
        )
        return RouteResult.new(request, provider_route.total_distance_m, points, provider_route.provider)

    logger.warning("All routing services failed, using straight-line calculation")
    return straight_line_route(request)


def straight_line_route(request: RouteRequest) -> RouteResult:
    """
    Straight-line fallback wrapped as a RouteResult. Cannot fail for a valid request.
    """
    points = straight_line_points(request.start, request.end, request.spacing_m)
    return RouteResult.new(request, distance(request.start, request.end), points, STRAIGHT_LINE)
