"""
Purpose: The provider fallback chain.

Each RouteSource answers one question: "can you give me a polyline for this
request?" It returns a ProviderRoute, or None when it cannot (the explicit
"unavailable" signal). Provider failures never escape a source.

Priority order (see build_route_sources):
1. KeyedProviderSource  - OpenRouteService, only when an API key is configured
2. FreeProviderSource   - public OSRM
3. NoRouteSource        - always unavailable (routing switched off)

When every source is unavailable the route service falls back to the straight line.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .config import RoutingServiceOptions
from .errors import ProviderUnavailable
from .models import ProviderRoute, RouteRequest
from .openrouteservice_client import OpenRouteServiceClient
from .osrm_client import OSRMClient

logger = logging.getLogger(__name__)


class RouteSource:
    """
    Uniform interface for every upstream data source.
    """
    name = "none"

    def fetch(self, request: RouteRequest) -> Optional[ProviderRoute]:
        raise NotImplementedError


class _ClientSource(RouteSource):
    """
    Wraps a provider client: absorbs ProviderUnavailable / InvalidRouteData
    and turns them into the "unavailable" signal.
    """

    def __init__(self, client):
        self.client = client

    def fetch(self, request: RouteRequest) -> Optional[ProviderRoute]:
        try:
            return self.client.fetch_route(request.start, request.end, request.travel_mode)
        except ProviderUnavailable as e:
            logger.warning(f"{self.name} unavailable, trying next source: {e.reason}")
            return None


class KeyedProviderSource(_ClientSource):
    """Key-authenticated road routing (OpenRouteService)."""
    name = "openrouteservice"


class FreeProviderSource(_ClientSource):
    """Free public road routing (OSRM)."""
    name = "osrm"


class NoRouteSource(RouteSource):
    """No routing service available. Always unavailable."""
    name = "none"

    def fetch(self, request: RouteRequest) -> Optional[ProviderRoute]:
        return None


def build_route_sources(options: RoutingServiceOptions) -> List[RouteSource]:
    """
    Turn configuration into the ordered list of sources to try.
    """
    if not options.routing_enabled:
        return [NoRouteSource()]

    sources: List[RouteSource] = []
    if options.has_openrouteservice:
        sources.append(KeyedProviderSource(OpenRouteServiceClient.from_options(options)))
    sources.append(FreeProviderSource(OSRMClient.from_options(options)))
    return sources
