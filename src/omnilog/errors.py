"""
Omnilog exception hierarchy.

Only environment-capability mismatches are ever raised to callers. I/O
failures are wrapped in :class:`InitializationFailure` and reported through
the console error path instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class OmnilogError(Exception):
    """Base class for all omnilog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class EnvironmentMismatch(OmnilogError):
    """Raised when a sink is constructed on a runtime that cannot host it.

    Only :class:`~omnilog.sinks.file.FileSink` raises this, at construction.
    """

    def __init__(self, *, sink: str, platform: str) -> None:
        message = (
            f"{sink} is only available on server runtimes (detected: {platform}). "
            "Use MobileSink or ConsoleSink for mobile and browser environments."
        )
        super().__init__(
            message,
            code="ENVIRONMENT_MISMATCH",
            details={"sink": sink, "platform": platform},
        )


class InitializationFailure(OmnilogError):
    """Directory creation or stream opening failed.

    Never raised past the sink; it is handed to the console error path and the
    sink keeps running with its streams released.
    """

    def __init__(self, *, operation: str, path: str, cause: BaseException) -> None:
        super().__init__(
            f"Failed to {operation} '{path}': {cause}",
            code="INITIALIZATION_FAILURE",
            details={"operation": operation, "path": path},
        )
        self.__cause__ = cause
