"""
Logging Configuration.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Process-wide console configuration.

    ``console_level`` is kept as a raw string: unknown values resolve to
    ``info`` at emit time instead of failing validation.
    """

    model_config = SettingsConfigDict(
        env_prefix="OMNILOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    console_level: str | None = Field(
        default=None,
        validation_alias=AliasChoices("console_level", "CONSOLE_LEVEL", "OMNILOG_CONSOLE_LEVEL"),
        description="Console threshold (error, warn, info, debug)",
    )
    console_color: bool = Field(default=False, description="Colorize markers when writing to a TTY")
