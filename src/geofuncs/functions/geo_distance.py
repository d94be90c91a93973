"""geoDistance(): great-circle distance between two coordinate pairs (Haversine)."""

from __future__ import annotations

from typing import Any, Mapping

from geofuncs.core.geo import (
    LAT_RANGE,
    LNG_RANGE,
    METERS_PER_UNIT,
    GeoPoint,
    convert_distance,
    haversine_m,
    in_range,
)
from geofuncs.config.settings import get_settings
from geofuncs.domain.models import FunctionMetadata
from geofuncs.functions.base import ORDINALS, Function, arg_kind, to_float

COORDINATE_NAMES = ("lat1", "lng1", "lat2", "lng2")

# Range checks run in this order regardless of argument position.
_RANGE_CHECKS = (
    ("lat1", LAT_RANGE),
    ("lat2", LAT_RANGE),
    ("lng1", LNG_RANGE),
    ("lng2", LNG_RANGE),
)


class GeoDistance(Function):
    metadata = FunctionMetadata(
        name="geoDistance",
        description=(
            "Calculates the great circle distance between two coordinate pairs using the Haversine formula. "
            "Usage: geoDistance(lat1, lng1, lat2, lng2) or geoDistance(lat1, lng1, lat2, lng2, unit)"
        ),
        params="number lat1, number lng1, number lat2, number lng2, optional string unit",
        returns="number",
    )

    def __init__(self, radius_m: float | None = None) -> None:
        if radius_m is None:
            radius_m = get_settings().geo.earth_radius_m
        self.radius_m = float(radius_m)

    def evaluate(self, bindings: Mapping[str, Any] | None, args: list[Any]) -> Any:
        if not 4 <= len(args) <= 5:
            return self.error(
                "ArityError",
                f"{self.name}() expects 4 or 5 arguments: lat1, lng1, lat2, lng2, and optional unit ('m', 'km', 'mi')",
            )

        coords: dict[str, float] = {}
        for position, name in enumerate(COORDINATE_NAMES):
            if arg_kind(args[position]) != "number":
                if position < 2:
                    return self.expects_number(position)
                return self.error(
                    "TypeError",
                    f"{self.name}() {ORDINALS[position]} argument ({name}) must be a number",
                )
            coords[name] = to_float(args[position])

        for name, bounds in _RANGE_CHECKS:
            if not in_range(coords[name], bounds):
                low, high = bounds
                return self.error("RangeError", f"{name} must be between {low:g} and {high:g} degrees")

        unit = "m"
        if len(args) == 5:
            if arg_kind(args[4]) != "string":
                return self.error("TypeError", f"{self.name}() fifth argument (unit) must be a string")
            unit = args[4].lower()
            if unit not in METERS_PER_UNIT:
                return self.error(
                    "ValueError",
                    f"{self.name}() unit must be 'm' (meters), 'km' (kilometers), or 'mi' (miles)",
                )

        meters = haversine_m(
            GeoPoint(coords["lat1"], coords["lng1"]),
            GeoPoint(coords["lat2"], coords["lng2"]),
            radius_m=self.radius_m,
        )
        return convert_distance(meters, unit)
