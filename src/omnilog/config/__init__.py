"""
Omnilog Configuration Module.

Each settings class owns an independent concern with its own environment
variable prefix:

- ``LoggingSettings``: ``CONSOLE_LEVEL`` / ``OMNILOG_*``
- ``FileSinkSettings``: ``OMNILOG_FILE_*``
- ``MobileSinkSettings``: ``OMNILOG_MOBILE_*``

Values passed as keyword arguments always win over the environment.
"""

from .logging import LoggingSettings
from .sinks import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_FILES, FileSinkSettings, LevelName, MobileSinkSettings

__all__ = [
    "DEFAULT_MAX_FILE_SIZE",
    "DEFAULT_MAX_FILES",
    "FileSinkSettings",
    "LevelName",
    "LoggingSettings",
    "MobileSinkSettings",
]
