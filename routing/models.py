"""
Purpose: Domain models for the directions capability.
What it does:
- Defines core data structures:
- Coordinate (lat, lon) value
- RouteRequest (start, end, spacing, travel mode)
- RoutePoint (lat, lon, distance_from_start, sequence_number)
- RouteResult (total distance, points, echo of the request coordinates, source)
- ProviderRoute (normalized polyline + distance from an upstream provider)

Defines enums/constants:
- TravelMode = Cycling | Walking | Driving

Rule: No HTTP calls, no resampling logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import InvalidInput

DEFAULT_SPACING_M = 50.0
MIN_SPACING_M = 1.0
MAX_SPACING_M = 1000.0


class TravelMode(str, Enum):
    """
    Travel mode requested by the caller.
    Each mode maps to a provider specific profile (see routing.profiles).
    """
    CYCLING = "Cycling"
    WALKING = "Walking"
    DRIVING = "Driving"

    @classmethod
    def parse(cls, value: Union[str, int, TravelMode]) -> TravelMode:
        """
        Accepts the mode name in any case ("walking", "Walking") or the
        legacy ordinal (0 = Cycling, 1 = Walking, 2 = Driving).
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip()
        if text.isdigit():
            ordinals = list(cls)
            index = int(text)
            if index < len(ordinals):
                return ordinals[index]
        else:
            for mode in cls:
                if mode.value.lower() == text.lower():
                    return mode

        raise ValueError(f"Unknown travel mode: {value!r}")


@dataclass(frozen=True)
class Coordinate:
    """A geographic point in degrees."""
    latitude: float
    longitude: float

    @classmethod
    def from_lon_lat(cls, pair) -> Coordinate:
        """Providers speak (lon, lat); we store (lat, lon)."""
        lon, lat = pair[0], pair[1]
        return cls(latitude=float(lat), longitude=float(lon))


@dataclass(frozen=True)
class RouteRequest:
    """
    One directions request. Fully specified before resampling starts
    and never mutated afterwards.
    """
    start: Coordinate
    end: Coordinate
    spacing_m: float = DEFAULT_SPACING_M
    travel_mode: TravelMode = TravelMode.CYCLING

    @classmethod
    def new(
        cls,
        start_lat: float,
        start_lng: float,
        end_lat: float,
        end_lng: float,
        spacing_m: float = DEFAULT_SPACING_M,
        travel_mode: Union[str, int, TravelMode] = TravelMode.CYCLING,
    ) -> RouteRequest:
        return cls(
            start=Coordinate(start_lat, start_lng),
            end=Coordinate(end_lat, end_lng),
            spacing_m=float(spacing_m),
            travel_mode=TravelMode.parse(travel_mode),
        )

    def validate(self) -> None:
        """
        Range checks. Raises InvalidInput naming the first bad field.
        """
        _check_range("start_lat", "Start latitude", self.start.latitude, -90, 90)
        _check_range("start_lng", "Start longitude", self.start.longitude, -180, 180)
        _check_range("end_lat", "End latitude", self.end.latitude, -90, 90)
        _check_range("end_lng", "End longitude", self.end.longitude, -180, 180)

        if not MIN_SPACING_M <= self.spacing_m <= MAX_SPACING_M:
            raise InvalidInput(
                "spacing",
                f"Spacing must be between {MIN_SPACING_M:g} and {MAX_SPACING_M:g} meters",
            )


def _check_range(field_name: str, label: str, value: float, low: float, high: float) -> None:
    # NaN fails both comparisons and is rejected too
    if not low <= value <= high:
        raise InvalidInput(field_name, f"{label} must be between {low} and {high}")


@dataclass(frozen=True)
class RoutePoint:
    """A resampled point along the route."""
    latitude: float
    longitude: float
    distance_from_start: float  # in meters
    sequence_number: int

    @property
    def location(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def at(cls, coordinate: Coordinate, distance_from_start: float, sequence_number: int) -> RoutePoint:
        return cls(coordinate.latitude, coordinate.longitude, distance_from_start, sequence_number)


@dataclass(frozen=True)
class ProviderRoute:
    """
    Normalized output of an upstream provider: what the resampler consumes.
    """
    polyline: List[Coordinate]
    total_distance_m: float
    provider: str


@dataclass
class RouteResult:
    """
    Output of the pipeline (what goes back to the caller).
    """
    total_distance_m: float
    route_points: List[RoutePoint]
    start: Coordinate
    end: Coordinate
    provider: str = "straight_line"  # which source produced the geometry

    @property
    def point_count(self) -> int:
        return len(self.route_points)

    @staticmethod
    def new(request: RouteRequest, total_distance_m: float,
            route_points: List[RoutePoint], provider: str) -> RouteResult:
        return RouteResult(
            total_distance_m=total_distance_m,
            route_points=route_points,
            start=request.start,
            end=request.end,
            provider=provider,
        )
