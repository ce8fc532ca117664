"""
Purpose: Resample a provider polyline into evenly spaced route points.

Spacing semantics: targets are literal multiples of the caller's spacing
(spacing, 2*spacing, ...). The final point closes the route at the provider's
total distance, so the last gap is usually shorter than the spacing.

Segment distances (haversine) decide WHERE a target lands; the provider's
total distance decides WHEN to stop and is what gets reported.
"""
from __future__ import annotations

from typing import List, Sequence

from .errors import InvalidRouteData
from .geodesy import distance, interpolate
from .models import Coordinate, RoutePoint

# Closing tolerance: if the last emitted point is within this many meters of
# the total distance, the end of the polyline is not appended again.
CLOSING_TOLERANCE_M = 1.0


def resample_polyline(
        polyline: Sequence[Coordinate],
        total_distance_m: float,
        spacing_m: float,
) -> List[RoutePoint]:
    """
    Walk the polyline and emit a point every `spacing_m` meters.

    Args:
        polyline: path coordinates in order (at least 2)
        total_distance_m: provider reported route length
        spacing_m: distance between consecutive output points

    Returns:
        List[RoutePoint] with sequence numbers 0..n-1, first at 0 m and the
        last within CLOSING_TOLERANCE_M of total_distance_m.
    """
    if spacing_m <= 0:
        raise ValueError("spacing_m must be > 0")
    if len(polyline) < 2:
        raise InvalidRouteData(
            "polyline", f"at least 2 coordinates are required, got {len(polyline)}"
        )

    points: List[RoutePoint] = [RoutePoint.at(polyline[0], 0.0, 0)]

    current_distance = 0.0  # distance along fully consumed segments
    next_seq = 1

    for prev, cur in zip(polyline, polyline[1:]):
        segment_distance = distance(prev, cur)

        target = next_seq * spacing_m
        while current_distance + segment_distance >= target and target <= total_distance_m:
            fraction = (target - current_distance) / segment_distance
            point = interpolate(prev, cur, fraction)
            points.append(RoutePoint.at(point, target, next_seq))

            next_seq += 1
            target = next_seq * spacing_m

        current_distance += segment_distance

    # close the route at the last coordinate unless we already landed on it
    if len(points) == 1 or points[-1].distance_from_start < total_distance_m - CLOSING_TOLERANCE_M:
        points.append(RoutePoint.at(polyline[-1], total_distance_m, len(points)))

    return points
