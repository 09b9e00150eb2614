"""
Sink implementations.

``omnilog.sinks.file`` is deliberately not imported here: restricted entry
surfaces import this package and must never pull in filesystem handling.
"""

from .base import BaseSink

__all__ = ["BaseSink"]
