# src/geofuncs/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and mounts the routes.
Function evaluation lives in `geofuncs.functions`.
"""

from __future__ import annotations

from fastapi import FastAPI

from geofuncs.config.settings import get_settings
from geofuncs.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title=f"{get_settings().app.name} API", version="0.1.0")
app.include_router(router)
