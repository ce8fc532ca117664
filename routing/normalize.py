"""
Purpose: Turn raw provider geometry into the resampler's input shape.

Providers disagree on geometry encoding:
- GeoJSON style: [[lon, lat], ...] or {"coordinates": [[lon, lat], ...]}
- Encoded polyline string (OpenRouteService default): decodes to (lat, lon)

Everything ends up as a ProviderRoute with Coordinate(lat, lon) values.
"""
from __future__ import annotations

import math
from typing import Any, List

import polyline as polyline_codec

from .errors import InvalidRouteData
from .models import Coordinate, ProviderRoute


def coordinates_from_geometry(provider: str, geometry: Any) -> List[Coordinate]:
    """
    Decode provider geometry into a list of Coordinate (lat, lon).
    Raises InvalidRouteData when the geometry is absent or malformed.
    """
    if not geometry:
        raise InvalidRouteData(provider, "route has no geometry")

    if isinstance(geometry, str):
        try:
            decoded = polyline_codec.decode(geometry)
        except (ValueError, IndexError, TypeError) as e:
            raise InvalidRouteData(provider, f"undecodable polyline: {e}") from e
        #polyline decodes straight to (lat, lon)
        return [Coordinate(float(lat), float(lon)) for lat, lon in decoded]

    if isinstance(geometry, dict):
        geometry = geometry.get("coordinates")
        if not geometry:
            raise InvalidRouteData(provider, "geometry has no coordinates")

    if not isinstance(geometry, list):
        raise InvalidRouteData(provider, f"unsupported geometry type {type(geometry).__name__}")

    coordinates = []
    for pair in geometry:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2:
            raise InvalidRouteData(provider, f"bad coordinate pair {pair!r}")
        try:
            coordinates.append(Coordinate.from_lon_lat(pair))
        except (TypeError, ValueError) as e:
            raise InvalidRouteData(provider, f"bad coordinate pair {pair!r}") from e
    return coordinates


def build_provider_route(provider: str, geometry: Any, total_distance_m: Any) -> ProviderRoute:
    """
    Validate and normalize one provider route.
    The polyline must have at least 2 coordinates and the distance must be
    a finite, non-negative number of meters.
    """
    polyline = coordinates_from_geometry(provider, geometry)
    if len(polyline) < 2:
        raise InvalidRouteData(provider, f"polyline has {len(polyline)} coordinate(s), need at least 2")

    try:
        distance_m = float(total_distance_m)
    except (TypeError, ValueError) as e:
        raise InvalidRouteData(provider, f"bad route distance {total_distance_m!r}") from e

    if not math.isfinite(distance_m) or distance_m < 0:
        raise InvalidRouteData(provider, f"bad route distance {distance_m}")

    return ProviderRoute(polyline=polyline, total_distance_m=distance_m, provider=provider)
