"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import Any

_options: dict[str, Any] | None = None


def get_options() -> dict[str, Any]:
    """FastAPI dependency: return the options loaded at startup."""
    assert _options is not None, "Options not initialised"
    return _options


def get_max_content_bytes() -> int:
    """FastAPI dependency: the largest source text the API accepts, in bytes."""
    return int(get_options()["max_content_bytes"])
