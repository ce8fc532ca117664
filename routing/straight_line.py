#Purpose: Straight-line fallback used when no routing provider produced a polyline.
#Unlike resample_polyline, spacing is redistributed so that every interval is equal:
#intervals = ceil(total / spacing), actual_interval = total / intervals.
#Geometric approximation only, no road following.

import math
from typing import List

from .geodesy import distance, interpolate
from .models import Coordinate, RoutePoint


def straight_line_points(start: Coordinate, end: Coordinate, spacing_m: float) -> List[RoutePoint]:
    """
    Evenly spaced points on the straight segment start -> end.

    Returns intervals + 1 points, or a single point when start == end.
    """
    if spacing_m <= 0:
        raise ValueError("spacing_m must be > 0")

    total_distance_m = distance(start, end)

    #boundary case: nothing to walk, the route is its own start point
    if total_distance_m == 0:
        return [RoutePoint.at(start, 0.0, 0)]

    intervals = max(1, math.ceil(total_distance_m / spacing_m))
    actual_interval = total_distance_m / intervals

    points = [RoutePoint.at(start, 0.0, 0)]

    for i in range(1, intervals):
        point = interpolate(start, end, i / intervals)
        points.append(RoutePoint.at(point, i * actual_interval, i))

    points.append(RoutePoint.at(end, total_distance_m, intervals))
    return points
