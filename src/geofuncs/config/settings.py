# src/geofuncs/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geofuncs/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GEOFUNCS_LOG_LEVEL`, `GEOFUNCS_EARTH_RADIUS_M`)
- an external YAML file via `GEOFUNCS_CONFIG_PATH`
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from typing import Any
from geofuncs.core.env import load_dotenv_if_present, resolve_project_path

import yaml
from pydantic import BaseModel, Field


def _parse_mapping(text: str, source: str) -> dict[str, Any]:
    """Parse YAML text whose root must be a mapping (an empty document counts as `{}`)."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {source}; expected a mapping.")
    return data


def _read_package_yaml(filename: str) -> dict[str, Any]:
    return _parse_mapping(resources.files("geofuncs.config").joinpath(filename).read_text(encoding="utf-8"), filename)


def _read_config_file(path: str) -> dict[str, Any]:
    """Read the file named by `GEOFUNCS_CONFIG_PATH` (relative paths start at the project root)."""
    resolved = resolve_project_path(path)
    return _parse_mapping(resolved.read_text(encoding="utf-8"), str(resolved))


class AppSettings(BaseModel):
    name: str = "geofuncs"
    log_level: str = "INFO"


class GeoSettings(BaseModel):
    # Mean Earth radius; geoDistance treats the Earth as a sphere of this size.
    earth_radius_m: float = Field(6_371_000.0, gt=0)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geo: GeoSettings = Field(default_factory=GeoSettings)


# Environment variable -> (section, key) in the raw settings payload.
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "GEOFUNCS_LOG_LEVEL": ("app", "log_level"),
    "GEOFUNCS_EARTH_RADIUS_M": ("geo", "earth_radius_m"),
}


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    data = dict(data)
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[section] = {**(data.get(section) or {}), key: value}
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOFUNCS_CONFIG_PATH")
    raw = _read_config_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
