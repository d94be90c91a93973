from __future__ import annotations

import pytest

from geofuncs.domain.models import EvalError
from geofuncs.functions.registry import (
    call_function,
    describe_functions,
    function_names,
    get_function,
    get_function_name,
)


def test_registry_lists_both_functions_with_metadata():
    # Names are sorted so CLI/API listings are stable.
    assert function_names() == ["decToGMS", "geoDistance"]

    meta = {m.name: m for m in describe_functions()}
    assert meta["decToGMS"].returns == "string"
    assert meta["decToGMS"].params == "number decimal, optional string coordType"
    assert meta["geoDistance"].returns == "number"
    assert meta["geoDistance"].description.startswith("Calculates the great circle distance")


def test_get_function_name_round_trips():
    function = get_function("geoDistance")
    assert get_function_name(function) == "geoDistance"
    assert function.metadata.returns == "number"


def test_unknown_function_raises_key_error():
    with pytest.raises(KeyError):
        get_function("decToDMS")
    # Lookups are case-sensitive.
    with pytest.raises(KeyError):
        call_function("geodistance", [0, 0, 0, 0])


def test_call_function_returns_values_and_errors():
    assert call_function("decToGMS", [40.7128, "lat"]) == "40° 42' 46.08\" N"

    error = call_function("geoDistance", [40.7128, -74.0060, 34.0522, -118.2437, "invalidunit"])
    assert isinstance(error, EvalError)
    assert error.kind == "ValueError"


def test_error_messages_use_registered_name():
    error = call_function("decToGMS", [])
    assert error.message.startswith("decToGMS()")


def test_reset_registry_picks_up_new_radius(monkeypatch):
    from geofuncs.config.settings import get_settings
    from geofuncs.functions.registry import reset_registry

    monkeypatch.setenv("GEOFUNCS_EARTH_RADIUS_M", "1000")
    get_settings.cache_clear()
    reset_registry()
    try:
        assert get_function("geoDistance").radius_m == 1000
    finally:
        monkeypatch.delenv("GEOFUNCS_EARTH_RADIUS_M")
        get_settings.cache_clear()
        reset_registry()
