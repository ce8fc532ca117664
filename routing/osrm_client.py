#Purpose: The OSRM “adapter/client” (free public routing provider).
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route/v1/{profile}/...)
#timeouts and error handling (no retries: the route sources move on instead)
#parsing response JSON into our internal shape (ProviderRoute)
#It should not contain resampling rules.

import logging
from typing import List, Optional

import requests

from .config import RoutingServiceOptions
from .errors import InvalidRouteData, OSRMError
from .models import Coordinate, ProviderRoute, TravelMode
from .normalize import build_provider_route
from .profiles import osrm_profile

logger = logging.getLogger(__name__)

PROVIDER_NAME = "osrm"


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout  # seconds to wait for OSRM before giving up

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

    @classmethod
    def from_options(cls, options: RoutingServiceOptions) -> "OSRMClient":
        return cls(base_url=options.osrm_base_url, timeout=options.timeout_s)

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[Coordinate]) -> str:
        """Convert list of Coordinate to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join(f"{c.longitude},{c.latitude}" for c in coords)

    def route_url(self, profile: str, coords: List[Coordinate]) -> str:
        return f"{self.base_url}/route/v1/{profile}/{self.format_coordinates(coords)}"

    #----------------
    # Public methods
    #----------------
    def fetch_route(self, start: Coordinate, end: Coordinate,
                    mode: Optional[TravelMode] = TravelMode.CYCLING) -> ProviderRoute:
        """
        Calls the OSRM /route endpoint for start -> end and returns the full
        route geometry with its distance.

        Raises:
            OSRMError: transport failure, non-success status or OSRM error code
            InvalidRouteData: OSRM answered but the geometry is unusable
        """
        url = self.route_url(osrm_profile(mode), [start, end])
        logger.debug("Calling OSRM route API: %s", url)

        try:
            response = requests.get(
                url,
                params={
                    "overview": "full",  # we need every vertex of the route
                    "geometries": "geojson",  # coordinates as [lon, lat] pairs
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise OSRMError(f"request failed: {e}") from e

        if not response.ok:
            raise OSRMError(f"HTTP {response.status_code}")

        try:
            data = response.json()  # OSRM returns a JSON response with routes
        except ValueError as e:
            raise OSRMError(f"invalid JSON: {e}") from e

        #validating OSRM response
        if not isinstance(data, dict) or data.get("code") != "Ok":
            message = data.get("message", "Unknown error") if isinstance(data, dict) else "Unknown error"
            raise OSRMError(f"OSRM error: {message}")

        routes = data.get("routes") or []
        if not isinstance(routes, list):
            raise InvalidRouteData(PROVIDER_NAME, "routes is not a list")
        if not routes:
            raise InvalidRouteData(PROVIDER_NAME, "no routes returned")

        route = routes[0]  # take the first route (OSRM may return alternatives)
        if not isinstance(route, dict):
            raise InvalidRouteData(PROVIDER_NAME, "route is not an object")

        return build_provider_route(PROVIDER_NAME, route.get("geometry"), route.get("distance"))
