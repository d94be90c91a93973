"""
Function registry.

Maps expression names (e.g. `decToGMS`) to function instances so the CLI and API
can list and invoke them by name. Functions are created lazily on first lookup
because `GeoDistance` reads its Earth radius from settings.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Sequence

from geofuncs.domain.models import FunctionMetadata
from geofuncs.functions.base import Function
from geofuncs.functions.dec_to_gms import DecToGMS
from geofuncs.functions.geo_distance import GeoDistance

logger = logging.getLogger(__name__)

FUNCTION_CLASSES: tuple[type[Function], ...] = (DecToGMS, GeoDistance)


@lru_cache
def _registry() -> dict[str, Function]:
    return {cls.metadata.name: cls() for cls in FUNCTION_CLASSES}


def function_names() -> list[str]:
    return sorted(_registry())


def get_function(name: str) -> Function:
    """Return the registered function called `name` (case-sensitive).

    Raises:
        KeyError: If no function is registered under `name`.
    """
    registry = _registry()
    if name not in registry:
        logger.warning("Unknown function requested: %s", name)
        raise KeyError(name)
    return registry[name]


def get_function_name(function: Function) -> str:
    return function.metadata.name


def describe_functions() -> list[FunctionMetadata]:
    """Metadata for every registered function, sorted by name."""
    return [_registry()[name].metadata for name in function_names()]


def call_function(name: str, args: Sequence[Any], bindings: Mapping[str, Any] | None = None) -> Any:
    """Invoke a registered function; returns its value or an `EvalError`."""
    return get_function(name).call(bindings or {}, args)


def reset_registry() -> None:
    """Drop cached instances (used after settings change, e.g. in tests)."""
    _registry.cache_clear()
