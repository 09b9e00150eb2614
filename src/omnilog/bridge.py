"""
structlog integration.

Routes structlog events, and optionally stdlib ``logging`` records, into any
omnilog sink so application and third-party logs share one destination.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import render_value
from .levels import LevelLike, Severity
from .sinks.base import BaseSink

# =============================================================================
# Global State
# =============================================================================

_sink: BaseSink | None = None
_previous_root_level: int | None = None

_STDLIB_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARN: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}

_SINK_METHODS = {
    "critical": "error",
    "exception": "error",
    "error": "error",
    "warning": "warn",
    "warn": "warn",
    "info": "info",
    "debug": "debug",
}


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "root")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound ``_name`` into ``logger``."""
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Hand the event to the configured sink. Returns empty to suppress default output."""
    sink = _sink
    if sink is None:
        return ""

    level = str(event_dict.pop("level", method_name)).lower()
    event = event_dict.pop("event", "")
    logger_name = event_dict.pop("logger", "root")
    exception = event_dict.pop("exception", None)
    stack = event_dict.pop("stack", None)

    parts = [f"[{logger_name}]"] if logger_name != "root" else []
    parts.append(render_value(event))
    parts.extend(f"{key}={render_value(value)}" for key, value in event_dict.items())
    message = " ".join(part for part in parts if part)
    for trailer in (exception, stack):
        if trailer:
            message = f"{message}\n{trailer}"

    try:
        getattr(sink, _SINK_METHODS.get(level, "info"))(message)
    except Exception:
        pass  # Logging must never break the application
    return ""


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


# =============================================================================
# Stdlib Interception
# =============================================================================


class RedirectStdLibHandler(logging.Handler):
    """Redirect standard library logging records into structlog."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if "structlog" in record.name:
                return
            msg = self.format(record)
            get_logger(record.name).log(_standard_level(record.levelno), msg)
        except Exception:
            self.handleError(record)


def _standard_level(levelno: int) -> int:
    """Round a stdlib level down to the nearest standard level (custom levels included)."""
    for level in (logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO):
        if levelno >= level:
            return level
    return logging.DEBUG


def _detach_stdlib_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if isinstance(handler, RedirectStdLibHandler):
            root.removeHandler(handler)


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_logging(sink: BaseSink, *, level: LevelLike = "info", capture_stdlib: bool = True) -> None:
    """
    Send structlog (and optionally stdlib) logging to ``sink``.

    Args:
        sink: Destination sink
        level: Minimum level (error, warn, info, debug); unknown names mean info
        capture_stdlib: Also redirect records from the stdlib root logger
    """
    global _sink, _previous_root_level

    _sink = sink
    stdlib_level = _STDLIB_LEVELS[Severity.parse(level)]

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(stdlib_level),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    _detach_stdlib_handlers(root_logger)
    if capture_stdlib:
        if _previous_root_level is None:
            _previous_root_level = root_logger.level
        root_logger.setLevel(stdlib_level)
        root_logger.addHandler(RedirectStdLibHandler())


def reset_logging() -> None:
    """Undo :func:`configure_logging` and restore structlog defaults."""
    global _sink, _previous_root_level

    _sink = None
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    _detach_stdlib_handlers(root_logger)
    if _previous_root_level is not None:
        root_logger.setLevel(_previous_root_level)
        _previous_root_level = None
