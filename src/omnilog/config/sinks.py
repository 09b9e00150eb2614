"""
Sink Configuration.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["error", "warn", "info", "debug"]

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_FILES = 5


class FileSinkSettings(BaseSettings):
    """File sink configuration, immutable once the sink is built.

    ``max_file_size`` and ``max_files`` only take effect when ``rotate`` is set.
    """

    model_config = SettingsConfigDict(
        env_prefix="OMNILOG_FILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_dir: str = Field(description="Directory holding both log files")
    info_log_file: str = Field(default="info.log", min_length=1, description="Info/warn/debug log file name")
    error_log_file: str = Field(default="error.log", min_length=1, description="Error log file name")
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0, description="Rotation size threshold in bytes")
    max_files: int = Field(default=DEFAULT_MAX_FILES, ge=1, description="Files kept per log, including the live one")
    clear_on_init: bool = Field(default=False, description="Truncate both files on construction")
    rotate: bool = Field(default=False, description="Enforce max_file_size/max_files")


class MobileSinkSettings(BaseSettings):
    """Console-backed mobile sink configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OMNILOG_MOBILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    enable_console_logging: bool = Field(default=True, description="Master switch for console output")
    log_level: LevelName = Field(default="info", description="Minimum level written by this sink")
