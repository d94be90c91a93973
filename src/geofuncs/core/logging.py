"""
Logging setup for the CLI and API entrypoints.

The handler layout comes from the packaged `logging.yaml`; only the level of the
`geofuncs` logger tree is tuned at runtime, so third-party loggers keep the
level the YAML gives them.
"""

from __future__ import annotations

import copy
import logging.config

from geofuncs.config.settings import get_logging_config, get_settings

PACKAGE_LOGGER = "geofuncs"


def configure_logging(level: str | None = None) -> None:
    """Apply the YAML config; `level` (or `app.log_level` from settings) sets the package level."""
    config = copy.deepcopy(get_logging_config())
    level = (level or get_settings().app.log_level).upper()

    package = config.setdefault("loggers", {}).setdefault(PACKAGE_LOGGER, {})
    package["level"] = level
    logging.config.dictConfig(config)
