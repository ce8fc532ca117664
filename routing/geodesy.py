#Purpose: Geodesy primitives shared by the resampler and the straight-line fallback.
#distance(): haversine great-circle distance in meters.
#interpolate(): LINEAR lat/lon interpolation (not spherical).
#Linear interpolation is what provider polylines approximate between vertices,
#so interpolated points stay on the provider's segments.

import math

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance between two coordinates, in meters.
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (math.sin(d_lat / 2) ** 2
         + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude))
         * math.sin(d_lon / 2) ** 2)

    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c * 1000  # km -> m


def interpolate(a: Coordinate, b: Coordinate, fraction: float) -> Coordinate:
    """
    Linear interpolation of latitude and longitude independently.
    fraction=0 returns a, fraction=1 returns b (exactly).
    """
    if fraction == 0:
        return a
    if fraction == 1:
        return b

    return Coordinate(
        latitude=a.latitude + (b.latitude - a.latitude) * fraction,
        longitude=a.longitude + (b.longitude - a.longitude) * fraction,
    )
