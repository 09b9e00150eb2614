"""
Browser entry point.

Exposes the console and mobile sinks plus platform detection. The file sink is
intentionally absent so browser hosts never load filesystem handling.
"""

from .levels import Severity, get_log_level, set_log_level
from .platform import PlatformInfo, detect_platform, get_platform_name, is_file_logging_available
from .sinks.base import BaseSink
from .sinks.console import ConsoleSink, console, debug, error, info, log, warn
from .sinks.mobile import MobileSink, create_mobile_logger

__all__ = [
    "BaseSink",
    "ConsoleSink",
    "MobileSink",
    "PlatformInfo",
    "Severity",
    "console",
    "create_mobile_logger",
    "debug",
    "detect_platform",
    "error",
    "get_log_level",
    "get_platform_name",
    "info",
    "is_file_logging_available",
    "log",
    "set_log_level",
    "warn",
]
