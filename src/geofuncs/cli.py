"""
geofuncs CLI entrypoint.

Evaluates the geo expression functions from a shell, mainly for quick checks and
debugging. Arguments are handed to the functions unchanged (apart from parsing the
coordinates as floats) so validation messages match what an expression would see.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from geofuncs.core.logging import configure_logging
from geofuncs.functions.base import is_error
from geofuncs.functions.registry import call_function, describe_functions


def _emit(result: Any) -> int:
    """Print a function result; errors go to stderr with a non-zero exit code."""
    if is_error(result):
        print(str(result), file=sys.stderr)
        return 1
    print(result)
    return 0


def _cmd_dec_to_gms(args: argparse.Namespace) -> int:
    call_args: list[Any] = [args.value]
    if args.axis is not None:
        call_args.append(args.axis)
    return _emit(call_function("decToGMS", call_args))


def _cmd_geo_distance(args: argparse.Namespace) -> int:
    call_args: list[Any] = [args.lat1, args.lng1, args.lat2, args.lng2]
    if args.unit is not None:
        call_args.append(args.unit)
    return _emit(call_function("geoDistance", call_args))


def _cmd_describe(args: argparse.Namespace) -> int:
    functions = describe_functions()
    if args.json:
        print(json.dumps([f.model_dump(mode="json") for f in functions], ensure_ascii=False, indent=2))
        return 0

    for meta in functions:
        print(f"{meta.name}({meta.params}) -> {meta.returns}")
        print(f"    {meta.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the geofuncs CLI."""
    parser = argparse.ArgumentParser(prog="geofuncs")
    parser.add_argument("--log-level", default=None, help="Overrides app.log_level (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    dms = sub.add_parser("dec-to-gms", help="Convert decimal degrees to degrees/minutes/seconds.")
    dms.add_argument("value", type=float)
    dms.add_argument("--axis", type=str, default=None, help="lat, lng or lon (adds N/S or E/W)")
    dms.set_defaults(func=_cmd_dec_to_gms)

    dist = sub.add_parser("geo-distance", help="Great-circle distance between two points.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lng1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lng2", type=float)
    dist.add_argument("--unit", type=str, default=None, help="m (default), km or mi")
    dist.set_defaults(func=_cmd_geo_distance)

    desc = sub.add_parser("describe", help="List available functions and their signatures.")
    desc.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    desc.set_defaults(func=_cmd_describe)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geofuncs.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
