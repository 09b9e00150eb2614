"""
Sink abstraction shared by the console, file and mobile sinks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseSink(ABC):
    """Common contract so callers can swap sinks without code changes."""

    @abstractmethod
    def error(self, *args: Any) -> None: ...

    @abstractmethod
    def warn(self, *args: Any) -> None: ...

    @abstractmethod
    def info(self, *args: Any) -> None: ...

    @abstractmethod
    def debug(self, *args: Any) -> None: ...

    @abstractmethod
    def log(self, *args: Any) -> None:
        """Unmarked message, filtered at ``info``."""
        ...

    @abstractmethod
    def clear_logs(self) -> None:
        """Discard whatever the sink has persisted so far."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release resources. Must be safe to call more than once."""
        ...

    def was_cleared_on_init(self) -> bool:
        return False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
