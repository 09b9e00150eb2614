"""
Line rendering helpers: level markers, timestamps, value rendering and colors.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import orjson

from .levels import Severity

# =============================================================================
# Markers
# =============================================================================

MARKERS = {
    Severity.ERROR: "❌",
    Severity.WARN: "⚠️",
    Severity.INFO: "ℹ️",
    Severity.DEBUG: "🐞",
}

CLEAR_MARKER = "🧹"

# =============================================================================
# ANSI Color Codes
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "debug": "\033[36m",
    "info": "\033[32m",
    "warn": "\033[33m",
    "error": "\033[31m",
    "timestamp": "\033[90m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Value Rendering
# =============================================================================


def orjson_dumps(v: Any) -> str:
    return orjson.dumps(v, default=str, option=orjson.OPT_NON_STR_KEYS | orjson.OPT_UTC_Z).decode()


def render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        detail = str(value)
        return f"{type(value).__name__}: {detail}" if detail else type(value).__name__
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return orjson_dumps(value)
        except orjson.JSONEncodeError:
            return repr(value)
    return str(value)


def render_args(*args: Any) -> str:
    """Join rendered values with single spaces."""
    return " ".join(render_value(arg) for arg in args)


def with_marker(level: Severity | None, message: str) -> str:
    if level is None:
        return message
    return f"{MARKERS[level]} {message}" if message else MARKERS[level]
