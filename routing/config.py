"""
Purpose: Central configuration for the routing providers (single source of truth).
What it does:

Stores everything the provider chain needs:

OPENROUTESERVICE_API_KEY = "" (empty disables the keyed provider)

OPENROUTESERVICE_BASE_URL = https://api.openrouteservice.org

OSRM_BASE_URL = http://router.project-osrm.org

ROUTING_TIMEOUT_S = 10

ROUTING_ENABLED = true (false: straight-line only)

Rule: No logic here beyond parsing and validation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Read provider settings from environment / .env
# Example in .env:
# OPENROUTESERVICE_API_KEY=5b3ce3597851110001cf6248...
# OSRM_BASE_URL=http://router.project-osrm.org
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RoutingServiceOptions:
    """
    Provider configuration.

    Notes:
    - the keyed provider (OpenRouteService) is only tried when an API key is set.
    - OSRM's public demo server needs no key, so it is always available
      unless routing is switched off entirely.
    """

    openrouteservice_api_key: str = ""
    openrouteservice_base_url: str = "https://api.openrouteservice.org"
    osrm_base_url: str = "http://router.project-osrm.org"

    # seconds to wait for a provider before moving on to the next one
    timeout_s: float = 10.0

    routing_enabled: bool = True

    @property
    def has_openrouteservice(self) -> bool:
        return bool(self.openrouteservice_api_key)

    def validate(self) -> None:
        """
        Basic sanity checks. Called by from_env().
        """
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be > 0")

        if not self.osrm_base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        if self.has_openrouteservice and not self.openrouteservice_base_url:
            raise ValueError("OPENROUTESERVICE_BASE_URL must be set when an API key is configured")

    @classmethod
    def from_env(cls) -> RoutingServiceOptions:
        defaults = cls()
        options = cls(
            openrouteservice_api_key=os.getenv("OPENROUTESERVICE_API_KEY", "").strip(),
            openrouteservice_base_url=os.getenv(
                "OPENROUTESERVICE_BASE_URL", defaults.openrouteservice_base_url
            ).rstrip("/"),
            osrm_base_url=os.getenv("OSRM_BASE_URL", defaults.osrm_base_url).rstrip("/"),
            timeout_s=float(os.getenv("ROUTING_TIMEOUT_S", defaults.timeout_s)),
            routing_enabled=os.getenv("ROUTING_ENABLED", "true").strip().lower() in _TRUE_VALUES,
        )
        options.validate()
        return options


def offline_options() -> RoutingServiceOptions:
    """
    No live providers: every request takes the straight-line path.
    """
    return RoutingServiceOptions(routing_enabled=False)
