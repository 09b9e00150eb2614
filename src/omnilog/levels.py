"""
Severity scale and the level-filtering policy shared by every sink.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .config import LoggingSettings


class Severity(IntEnum):
    """Ordered severity scale; a lower value is more important."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: "LevelLike | None", default: "Severity | None" = None) -> "Severity":
        """Map a level name (case-insensitive) or Severity to a Severity.

        Unknown or empty values fall back to ``default`` (``INFO`` when omitted).
        """
        fallback = cls.INFO if default is None else default
        if isinstance(value, Severity):
            return value
        if not isinstance(value, str):
            return fallback
        key = value.strip().lower()
        return _ALIASES.get(key, fallback)


LevelLike = Union[Severity, str]

_ALIASES = {
    "error": Severity.ERROR,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "info": Severity.INFO,
    "debug": Severity.DEBUG,
}


def should_emit(candidate: Severity, threshold: Severity) -> bool:
    """A message is emitted iff its rank does not exceed the threshold's rank."""
    return int(candidate) <= int(threshold)


class LevelPolicy:
    """Resolves the effective threshold for the sinks bound to it.

    Resolution order: programmatic override, then the configured
    ``console_level`` string, then ``info``. The threshold is read on every
    call, so overrides reach sinks that were built earlier.

    Without explicit ``settings`` the policy follows the environment:
    ``LoggingSettings`` is rebuilt on each read, so a later change to
    ``CONSOLE_LEVEL`` takes effect. Explicit settings are fixed.
    """

    def __init__(self, settings: LoggingSettings | None = None, override: LevelLike | None = None):
        self._settings = settings
        self._override: Severity | None = None
        if override is not None:
            self.set_threshold(override)

    @property
    def settings(self) -> LoggingSettings:
        return self._settings if self._settings is not None else LoggingSettings()

    @property
    def override(self) -> Severity | None:
        return self._override

    def set_threshold(self, level: LevelLike) -> None:
        """Set the override. Unknown names resolve to ``info``."""
        self._override = Severity.parse(level)

    def reset(self) -> None:
        """Drop the override and fall back to the configured level."""
        self._override = None

    def threshold(self) -> Severity:
        if self._override is not None:
            return self._override
        return Severity.parse(self.settings.console_level)

    def allows(self, level: Severity) -> bool:
        return should_emit(level, self.threshold())


default_policy = LevelPolicy()


def set_log_level(level: LevelLike) -> None:
    """Override the process-wide threshold used by the default console."""
    default_policy.set_threshold(level)


def get_log_level() -> Severity:
    return default_policy.threshold()
