"""
File sink with separate info and error log files.

Server runtimes only: construction raises :class:`~omnilog.errors.EnvironmentMismatch`
elsewhere. Past that check nothing is raised to the caller; I/O failures are
reported through the console and the sink keeps running with its streams
released, dropping writes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

from ..config import FileSinkSettings
from ..errors import EnvironmentMismatch, InitializationFailure
from ..formatters import render_args, timestamp, with_marker
from ..levels import Severity
from ..platform import Environment, get_platform_name, is_file_logging_available
from .base import BaseSink
from .console import ConsoleSink, console as default_console

INFO = "info"
ERROR = "error"

STARTED_MARKER = "=== File Logger Started ==="
ERROR_STARTED_MARKER = "=== File Logger Error Log Started ==="


class FileSink(BaseSink):
    """Appends timestamped lines to ``<log_dir>/<info_log_file>`` and ``<log_dir>/<error_log_file>``.

    Each sink privately owns both handles; pointing two sinks at the same
    files interleaves their output unpredictably.

    Args:
        settings: Sink configuration; built from ``options`` when omitted
        environment: Platform descriptor (default: the running interpreter)
        console: Where I/O failures are reported
        **options: ``FileSinkSettings`` fields, used when ``settings`` is omitted
    """

    def __init__(
        self,
        settings: FileSinkSettings | None = None,
        *,
        environment: Environment | None = None,
        console: ConsoleSink | None = None,
        **options: Any,
    ):
        if not is_file_logging_available(environment):
            raise EnvironmentMismatch(sink=type(self).__name__, platform=get_platform_name(environment))
        if settings is not None and options:
            raise TypeError("Pass either a FileSinkSettings instance or keyword options, not both")

        self._settings = settings if settings is not None else FileSinkSettings(**options)
        self._console = console if console is not None else default_console
        log_dir = Path(self._settings.log_dir)
        self._paths: dict[str, Path] = {
            INFO: log_dir / self._settings.info_log_file,
            ERROR: log_dir / self._settings.error_log_file,
        }
        self._streams: dict[str, TextIO | None] = {INFO: None, ERROR: None}

        self._initialize()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def _initialize(self) -> None:
        log_dir = Path(self._settings.log_dir)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self._report(InitializationFailure(operation="create log directory", path=str(log_dir), cause=exc))
            return

        mode = "w" if self._settings.clear_on_init else "a"
        for kind, path in self._paths.items():
            try:
                self._streams[kind] = self._open(path, mode)
            except OSError as exc:
                self.close()
                self._report(InitializationFailure(operation="open log file", path=str(path), cause=exc))
                return

        self.info(STARTED_MARKER)
        self.error(ERROR_STARTED_MARKER)

    @staticmethod
    def _open(path: Path, mode: str) -> TextIO:
        # Line buffered: every entry reaches the OS as soon as it is written.
        return open(path, mode, encoding="utf-8", errors="backslashreplace", buffering=1)

    def _report(self, failure: InitializationFailure) -> None:
        self._console.error("Failed to initialize file logging:", failure)

    def clear_logs(self) -> None:
        """Truncate both files and start over with fresh handles and startup markers."""
        self.close()
        for path in self._paths.values():
            try:
                if path.exists():
                    path.write_text("", encoding="utf-8")
            except OSError as exc:
                self._console.error(
                    "Failed to clear log files:",
                    InitializationFailure(operation="clear log file", path=str(path), cause=exc),
                )
                return
        self._initialize()

    def close(self) -> None:
        for kind, stream in self._streams.items():
            if stream is None:
                continue
            self._streams[kind] = None
            try:
                stream.close()
            except OSError as exc:
                self._console.error("Failed to close log file:", exc)

    @property
    def settings(self) -> FileSinkSettings:
        return self._settings

    @property
    def info_log_path(self) -> Path:
        return self._paths[INFO]

    @property
    def error_log_path(self) -> Path:
        return self._paths[ERROR]

    @property
    def is_open(self) -> bool:
        return any(stream is not None for stream in self._streams.values())

    def was_cleared_on_init(self) -> bool:
        return self._settings.clear_on_init

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def _write(self, kind: str, level: Severity | None, args: tuple[Any, ...]) -> None:
        stream = self._streams[kind]
        if stream is None or stream.closed:
            return
        try:
            stream.write(f"{timestamp()} - {with_marker(level, render_args(*args))}\n")
            if self._settings.rotate:
                self._maybe_rotate(kind)
        except OSError as exc:
            self._streams[kind] = None
            self._console.error(f"Failed to write {kind} log, further entries are dropped:", exc)

    def _maybe_rotate(self, kind: str) -> None:
        path = self._paths[kind]
        if path.stat().st_size <= self._settings.max_file_size:
            return

        stream = self._streams[kind]
        if stream is not None:
            stream.close()
        self._streams[kind] = None

        backups = self._settings.max_files - 1
        if backups > 0:
            path.with_name(f"{path.name}.{backups}").unlink(missing_ok=True)
            for i in range(backups - 1, 0, -1):
                src = path.with_name(f"{path.name}.{i}")
                if src.exists():
                    src.replace(path.with_name(f"{path.name}.{i + 1}"))
            path.replace(path.with_name(f"{path.name}.1"))
            self._streams[kind] = self._open(path, "a")
        else:
            self._streams[kind] = self._open(path, "w")

    def info(self, *args: Any) -> None:
        self._write(INFO, None, args)

    def warn(self, *args: Any) -> None:
        self._write(INFO, Severity.WARN, args)

    def debug(self, *args: Any) -> None:
        self._write(INFO, Severity.DEBUG, args)

    def log(self, *args: Any) -> None:
        self._write(INFO, None, args)

    def error(self, *args: Any) -> None:
        self._write(ERROR, Severity.ERROR, args)


def create_file_logger(settings: FileSinkSettings | None = None, **options: Any) -> FileSink:
    """Convenience factory for :class:`FileSink`."""
    return FileSink(settings, **options)
