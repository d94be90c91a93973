from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt
from typing import Literal

"""
Spherical geometry helpers.

Everything here is plain float math on a spherical Earth model; there is no
ellipsoid and no datum handling. The expression functions in `geofuncs.functions`
validate their inputs and then delegate to these helpers.
"""

EARTH_RADIUS_M = 6_371_000.0

DistanceUnit = Literal["m", "km", "mi"]

METERS_PER_UNIT: dict[str, float] = {
    "m": 1.0,
    "km": 1000.0,
    "mi": 1609.344,
}

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class DmsParts:
    """Unsigned degrees/minutes/seconds plus the sign of the original value."""

    negative: bool
    degrees: int
    minutes: int
    seconds: float


def in_range(value: float, bounds: tuple[float, float]) -> bool:
    """Inclusive range check."""
    low, high = bounds
    return low <= value <= high


def haversine_m(a: GeoPoint, b: GeoPoint, *, radius_m: float = EARTH_RADIUS_M) -> float:
    """Compute great-circle distance in meters between two points."""
    lat1 = radians(a.lat)
    lng1 = radians(a.lng)
    lat2 = radians(b.lat)
    lng2 = radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    h = sin(dlat / 2) * sin(dlat / 2) + cos(lat1) * cos(lat2) * sin(dlng / 2) * sin(dlng / 2)
    return radius_m * 2 * atan2(sqrt(h), sqrt(1 - h))


def convert_distance(meters: float, unit: DistanceUnit) -> float:
    """Convert a distance in meters into `unit` (m, km or mi)."""
    if unit == "m":
        return meters
    return meters / METERS_PER_UNIT[unit]


def split_dms(decimal: float) -> DmsParts:
    """Split decimal degrees into truncated degrees and minutes plus fractional seconds.

    Seconds are not carried into minutes when they format as 60.00; callers that
    render the parts see exactly what the truncation produced.
    """
    negative = decimal < 0
    magnitude = abs(decimal)

    degrees = int(magnitude)
    minutes_full = (magnitude - degrees) * 60
    minutes = int(minutes_full)
    seconds = (minutes_full - minutes) * 60
    return DmsParts(negative=negative, degrees=degrees, minutes=minutes, seconds=seconds)
