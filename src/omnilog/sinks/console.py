"""
Console sink with level-based filtering.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ..formatters import MARKERS, colorize, render_args
from ..levels import LevelPolicy, Severity, default_policy
from .base import BaseSink


class ConsoleSink(BaseSink):
    """Writes marked lines to stdout/stderr.

    ``error`` and ``warn`` go to stderr, everything else to stdout. Streams are
    resolved at write time unless given explicitly, so redirections of
    ``sys.stdout``/``sys.stderr`` made after construction are honored.

    Args:
        policy: Threshold source (default: the process-wide policy)
        stream: Output stream for info/debug/log
        error_stream: Output stream for error/warn
    """

    def __init__(
        self,
        policy: LevelPolicy | None = None,
        *,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
    ):
        self._policy = policy if policy is not None else default_policy
        self._stream = stream
        self._error_stream = error_stream

    @property
    def policy(self) -> LevelPolicy:
        return self._policy

    def bind(self, policy: LevelPolicy) -> "ConsoleSink":
        """Return a sink writing to the same streams under another policy."""
        return ConsoleSink(policy, stream=self._stream, error_stream=self._error_stream)

    def _target(self, level: Severity) -> TextIO:
        if level <= Severity.WARN:
            return self._error_stream or sys.stderr
        return self._stream or sys.stdout

    def _use_color(self, stream: TextIO) -> bool:
        if not self._policy.settings.console_color:
            return False
        return bool(getattr(stream, "isatty", lambda: False)())

    def _write(self, level: Severity, args: tuple[Any, ...], *, marked: bool = True) -> None:
        if self._policy.allows(level):
            self.notice(level, *args, marked=marked)

    def notice(self, level: Severity, *args: Any, marked: bool = True) -> None:
        """Write at ``level`` regardless of the threshold."""
        stream = self._target(level)
        parts = list(args)
        if marked:
            marker = MARKERS[level]
            if self._use_color(stream):
                marker = colorize(marker, level.label)
            parts.insert(0, marker)
        stream.write(render_args(*parts) + "\n")
        stream.flush()

    def error(self, *args: Any) -> None:
        self._write(Severity.ERROR, args)

    def warn(self, *args: Any) -> None:
        self._write(Severity.WARN, args)

    def info(self, *args: Any) -> None:
        self._write(Severity.INFO, args)

    def debug(self, *args: Any) -> None:
        self._write(Severity.DEBUG, args)

    def log(self, *args: Any) -> None:
        self._write(Severity.INFO, args, marked=False)

    def clear_logs(self) -> None:
        pass

    def close(self) -> None:
        pass


console = ConsoleSink()

error = console.error
warn = console.warn
info = console.info
debug = console.debug
log = console.log
