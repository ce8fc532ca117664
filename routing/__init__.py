#Marks routing as a package.
#Re-exports the public API (compute_route, RouteRequest, the route sources, ...)
#so the HTTP layer imports from routing without knowing internal file names.
#No business logic.

from .config import RoutingServiceOptions, offline_options
from .errors import (
    InvalidInput,
    InvalidRouteData,
    OpenRouteServiceError,
    OSRMError,
    ProviderUnavailable,
    RoutingError,
)
from .models import Coordinate, ProviderRoute, RoutePoint, RouteRequest, RouteResult, TravelMode
from .openrouteservice_client import OpenRouteServiceClient
from .osrm_client import OSRMClient
from .route_service import compute_route, straight_line_route
from .route_sources import (
    FreeProviderSource,
    KeyedProviderSource,
    NoRouteSource,
    RouteSource,
    build_route_sources,
)

__all__ = [
    "compute_route",
    "straight_line_route",
    "build_route_sources",
    "RoutingServiceOptions",
    "offline_options",
    "Coordinate",
    "ProviderRoute",
    "RoutePoint",
    "RouteRequest",
    "RouteResult",
    "TravelMode",
    "RouteSource",
    "KeyedProviderSource",
    "FreeProviderSource",
    "NoRouteSource",
    "OSRMClient",
    "OpenRouteServiceClient",
    "RoutingError",
    "InvalidInput",
    "ProviderUnavailable",
    "InvalidRouteData",
    "OSRMError",
    "OpenRouteServiceError",
]
