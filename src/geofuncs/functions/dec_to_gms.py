"""decToGMS(): decimal degrees to a degrees/minutes/seconds string."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from math import isfinite
from typing import Any, Literal, Mapping

from geofuncs.core.geo import LAT_RANGE, LNG_RANGE, DmsParts, in_range, split_dms
from geofuncs.domain.models import FunctionMetadata
from geofuncs.functions.base import Function, arg_kind, to_float

Axis = Literal["lat", "lng"]

# Accepted axis tags (lower-cased) and the axis they denote.
AXIS_ALIASES: dict[str, Axis] = {"lat": "lat", "lng": "lng", "lon": "lng"}

_SUFFIXES: dict[Axis | None, tuple[str, str]] = {
    "lat": (" N", " S"),
    "lng": (" E", " W"),
    None: ("", " (-)"),
}

_TWO_PLACES = Decimal("0.01")


def format_seconds(seconds: float) -> str:
    """Render seconds with exactly two decimals, rounding half up on the shortest repr."""
    return str(Decimal(repr(seconds)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def format_dms(parts: DmsParts, axis: Axis | None = None) -> str:
    positive, negative = _SUFFIXES[axis]
    suffix = negative if parts.negative else positive
    return f"{parts.degrees}° {parts.minutes}' {format_seconds(parts.seconds)}\"{suffix}"


class DecToGMS(Function):
    metadata = FunctionMetadata(
        name="decToGMS",
        description=(
            "Converts decimal degrees to degrees, minutes, seconds format. "
            "Usage: decToGMS(decimal) or decToGMS(decimal, 'lat'|'lng')"
        ),
        params="number decimal, optional string coordType",
        returns="string",
    )

    def evaluate(self, bindings: Mapping[str, Any] | None, args: list[Any]) -> Any:
        if not 1 <= len(args) <= 2:
            return self.error(
                "ArityError",
                f"{self.name}() expects one or two arguments: decimal degrees and optional coordinate type",
            )

        if arg_kind(args[0]) != "number":
            return self.expects_number(0)
        value = to_float(args[0])

        axis: Axis | None = None
        if len(args) == 2:
            if arg_kind(args[1]) != "string":
                return self.expects_string(1)
            tag = args[1].lower()
            if tag not in AXIS_ALIASES:
                return self.error(
                    "TypeError",
                    f"{self.name}() expects the second parameter to be 'lat', 'lng' or 'lon', got '{args[1]}'",
                )
            axis = AXIS_ALIASES[tag]

        if axis == "lat" and not in_range(value, LAT_RANGE):
            return self.error("RangeError", "Latitude must be between -90 and 90 degrees")
        if axis == "lng" and not in_range(value, LNG_RANGE):
            return self.error("RangeError", "Longitude must be between -180 and 180 degrees")
        if not isfinite(value):
            return self.error("RangeError", f"{self.name}() expects a finite number of degrees")

        return format_dms(split_dms(value), axis)
