"""
`.env` loading and relative path resolution for settings.

The project root is the nearest directory (from the working directory upwards)
holding a `pyproject.toml`; without one, the working directory itself.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ROOT_MARKER = "pyproject.toml"


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the nearest `.env` once; variables already in the environment win."""
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    load_dotenv(dotenv_path=found, override=False)
    return Path(found)


def get_project_root() -> Path:
    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if (candidate / ROOT_MARKER).is_file():
            return candidate
    return cwd


def resolve_project_path(path: str | Path) -> Path:
    """Absolute paths pass through; relative ones are taken from the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
