#Purpose: The OpenRouteService “adapter/client” (key-authenticated routing provider).
#Sole responsibility: talk to OpenRouteService via HTTP and return normalized outputs.
#Encapsulates ORS-specific details:
#API key in the Authorization header
#POST /v2/directions/{profile} with a JSON body of [lon, lat] pairs
#geometry as either an encoded polyline or [lon, lat] pairs
#distance under routes[0].summary.distance

import logging
from typing import Optional

import requests

from .config import RoutingServiceOptions
from .errors import InvalidRouteData, OpenRouteServiceError
from .models import Coordinate, ProviderRoute, TravelMode
from .normalize import build_provider_route
from .profiles import openrouteservice_profile

logger = logging.getLogger(__name__)

PROVIDER_NAME = "openrouteservice"


class OpenRouteServiceClient:
    """
    OpenRouteService Adapter / Client

    - Sends the API key with every request
    - Convert internal (lat, lon) → ORS [lon, lat]
    - Return normalized outputs
    """
    def __init__(self, api_key: str, base_url: str = "https://api.openrouteservice.org",
                 timeout: float = 10):
        if not api_key:
            raise ValueError("OpenRouteService API key not set. Please set OPENROUTESERVICE_API_KEY.")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_options(cls, options: RoutingServiceOptions) -> "OpenRouteServiceClient":
        return cls(
            api_key=options.openrouteservice_api_key,
            base_url=options.openrouteservice_base_url,
            timeout=options.timeout_s,
        )

    def fetch_route(self, start: Coordinate, end: Coordinate,
                    mode: Optional[TravelMode] = TravelMode.CYCLING) -> ProviderRoute:
        """
        Calls POST /v2/directions/{profile} for start -> end.

        Raises:
            OpenRouteServiceError: transport failure or non-success status
            InvalidRouteData: ORS answered but the geometry is unusable
        """
        profile = openrouteservice_profile(mode)
        url = f"{self.base_url}/v2/directions/{profile}"
        logger.debug("Calling OpenRouteService directions API: %s", url)

        body = {
            "coordinates": [
                [start.longitude, start.latitude],
                [end.longitude, end.latitude],
            ],
            "instructions": False,
            "geometry": True,
        }

        try:
            response = requests.post(
                url,
                json=body,
                headers={"Authorization": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise OpenRouteServiceError(f"request failed: {e}") from e

        if not response.ok:
            raise OpenRouteServiceError(f"HTTP {response.status_code} - {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise OpenRouteServiceError(f"invalid JSON: {e}") from e

        routes = data.get("routes") if isinstance(data, dict) else None
        if not routes:
            raise InvalidRouteData(PROVIDER_NAME, "no routes returned")
        if not isinstance(routes, list):
            raise InvalidRouteData(PROVIDER_NAME, "routes is not a list")

        route = routes[0]
        if not isinstance(route, dict):
            raise InvalidRouteData(PROVIDER_NAME, "route is not an object")
        # ORS leaves distance out of the summary for zero-length routes
        summary = route.get("summary") or {}
        if not isinstance(summary, dict):
            raise InvalidRouteData(PROVIDER_NAME, "summary is not an object")

        return build_provider_route(PROVIDER_NAME, route.get("geometry"), summary.get("distance", 0.0))
