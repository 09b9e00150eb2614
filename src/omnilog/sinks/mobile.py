"""
Console-backed sink with the same public surface as :class:`~omnilog.sinks.file.FileSink`,
for runtimes without persistent file storage.
"""

from __future__ import annotations

from typing import Any

from ..config import LoggingSettings, MobileSinkSettings
from ..formatters import CLEAR_MARKER
from ..levels import LevelPolicy, Severity
from ..platform import Environment, detect_platform
from .base import BaseSink
from .console import ConsoleSink, console as default_console


class MobileSink(BaseSink):
    """Routes every call to the console, filtered by the sink's own ``log_level``.

    The process-wide threshold does not apply here; each instance carries its
    own minimum level.

    Args:
        settings: Sink configuration; built from ``options`` when omitted
        environment: Platform descriptor (default: the running interpreter)
        console: Console providing the output streams; also receives the platform advisory,
            which is written regardless of any threshold
        **options: ``MobileSinkSettings`` fields, used when ``settings`` is omitted
    """

    def __init__(
        self,
        settings: MobileSinkSettings | None = None,
        *,
        environment: Environment | None = None,
        console: ConsoleSink | None = None,
        **options: Any,
    ):
        if settings is not None and options:
            raise TypeError("Pass either a MobileSinkSettings instance or keyword options, not both")
        self._settings = settings if settings is not None else MobileSinkSettings(**options)
        advisory = console if console is not None else default_console

        policy = LevelPolicy(LoggingSettings(console_level=None), override=self._settings.log_level)
        self._console = advisory.bind(policy)

        platform = detect_platform(environment)
        if not platform.is_mobile:
            advisory.notice(
                Severity.WARN,
                f"{type(self).__name__} is designed for mobile runtimes. "
                "Consider using FileSink on server runtimes."
            )

    @property
    def settings(self) -> MobileSinkSettings:
        return self._settings

    @property
    def enabled(self) -> bool:
        return self._settings.enable_console_logging

    @property
    def level(self) -> Severity:
        return self._console.policy.threshold()

    def info(self, *args: Any) -> None:
        if self.enabled:
            self._console.info(*args)

    def error(self, *args: Any) -> None:
        if self.enabled:
            self._console.error(*args)

    def warn(self, *args: Any) -> None:
        if self.enabled:
            self._console.warn(*args)

    def debug(self, *args: Any) -> None:
        if self.enabled:
            self._console.debug(*args)

    def log(self, *args: Any) -> None:
        if self.enabled:
            self._console.log(*args)

    def clear_logs(self) -> None:
        # Nothing is persisted, so there is nothing to truncate. The notice ignores log_level.
        if self.enabled:
            self._console.notice(
                Severity.INFO, CLEAR_MARKER, "Console logs cannot be cleared on this platform", marked=False
            )

    def close(self) -> None:
        pass


def create_mobile_logger(settings: MobileSinkSettings | None = None, **options: Any) -> MobileSink:
    """Convenience factory for :class:`MobileSink`."""
    return MobileSink(settings, **options)
