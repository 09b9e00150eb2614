"""
Omnilog: leveled, multi-sink logging that adapts to the host runtime.

Server entry point. ``FileSink`` is loaded on first access so the rest of the
package can be imported on runtimes without a filesystem; browser and mobile
hosts should import ``omnilog.browser`` or ``omnilog.mobile`` instead.
"""

from .errors import EnvironmentMismatch, InitializationFailure, OmnilogError
from .levels import LevelPolicy, Severity, default_policy, get_log_level, set_log_level, should_emit
from .platform import PlatformInfo, detect_platform, get_platform_name, is_file_logging_available
from .sinks.base import BaseSink
from .sinks.console import ConsoleSink, console, debug, error, info, log, warn
from .sinks.mobile import MobileSink, create_mobile_logger

_LAZY_FILE_EXPORTS = {"FileSink", "create_file_logger"}


def __getattr__(name: str):
    if name in _LAZY_FILE_EXPORTS:
        from .sinks import file as file_sink

        return getattr(file_sink, name)
    raise AttributeError(f"module 'omnilog' has no attribute {name}")


__all__ = [
    "BaseSink",
    "ConsoleSink",
    "EnvironmentMismatch",
    "FileSink",
    "InitializationFailure",
    "LevelPolicy",
    "MobileSink",
    "OmnilogError",
    "PlatformInfo",
    "Severity",
    "console",
    "create_file_logger",
    "create_mobile_logger",
    "debug",
    "default_policy",
    "detect_platform",
    "error",
    "get_log_level",
    "get_platform_name",
    "info",
    "is_file_logging_available",
    "log",
    "set_log_level",
    "should_emit",
    "warn",
]
