"""
Purpose: Error taxonomy for the routing capability.

- InvalidInput: request parameters outside their ranges (rejected before routing).
- ProviderUnavailable: a single upstream call failed. Absorbed by the route sources.
- InvalidRouteData: upstream answered "successfully" but the polyline is unusable.
  Handled exactly like ProviderUnavailable (advance to the next source).

Anything else escaping the pipeline is an unexpected internal error.
"""


class RoutingError(Exception):
    """Base class for routing errors."""
    pass


class InvalidInput(RoutingError, ValueError):
    """A RouteRequest field is outside its allowed range."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ProviderUnavailable(RoutingError):
    """An upstream routing provider could not produce a route."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class InvalidRouteData(ProviderUnavailable):
    """The provider returned a structurally invalid polyline."""
    pass


class OSRMError(ProviderUnavailable):
    """Custom exception for OSRM client errors."""

    def __init__(self, reason: str):
        super().__init__("osrm", reason)


class OpenRouteServiceError(ProviderUnavailable):
    """Custom exception for OpenRouteService client errors."""

    def __init__(self, reason: str):
        super().__init__("openrouteservice", reason)
