"""
Platform detection.

Detection runs over an *environment descriptor*: a mapping from host global
names (``navigator``, ``expo``, ``process``, ``window``, ``document``) to the
objects the host exposes. A missing key means the global is absent. Every
check is independently fail-safe, so detection never raises whatever the
descriptor holds.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Mapping, Optional

Environment = Mapping[str, Any]

MOBILE_NATIVE_PRODUCT = "ReactNative"
SERVER_RUNTIME_KEYS = ("node", "python")

_MISSING = object()


@dataclass(frozen=True)
class PlatformInfo:
    """Point-in-time platform classification."""

    is_server: bool
    is_mobile_native: bool
    is_browser: bool
    is_managed_mobile: bool

    @property
    def is_mobile(self) -> bool:
        return self.is_mobile_native or self.is_managed_mobile


def _lookup(obj: Any, name: str) -> Any:
    """Fetch ``name`` from ``obj`` by item or attribute; ``_MISSING`` if absent."""
    if obj is None or obj is _MISSING:
        return _MISSING
    try:
        if isinstance(obj, Mapping):
            return obj.get(name, _MISSING)
        return getattr(obj, name, _MISSING)
    except Exception:
        return _MISSING


def _exists(env: Environment, name: str) -> bool:
    value = _lookup(env, name)
    return value is not _MISSING and value is not None


def _is_mobile_native(env: Environment) -> bool:
    try:
        product = _lookup(_lookup(env, "navigator"), "product")
        return product == MOBILE_NATIVE_PRODUCT
    except Exception:
        return False


def _is_managed_mobile(env: Environment) -> bool:
    try:
        constants = _lookup(_lookup(env, "expo"), "Constants")
        return constants is not _MISSING and bool(constants)
    except Exception:
        return False


def _server_runtime_key(env: Environment) -> Optional[str]:
    try:
        versions = _lookup(_lookup(env, "process"), "versions")
        for key in SERVER_RUNTIME_KEYS:
            version = _lookup(versions, key)
            if version is not _MISSING and version:
                return key
    except Exception:
        pass
    return None


def current_environment() -> dict[str, Any]:
    """Build the descriptor for the running interpreter.

    Under Pyodide the JS ``globalThis`` is exposed through the ``js`` module;
    native CPython hosts get a synthesized ``process`` entry.
    """
    env: dict[str, Any] = {}
    if sys.platform in ("emscripten", "wasi"):
        try:
            import js  # type: ignore[import-not-found]
        except ImportError:
            return env
        for name in ("navigator", "expo", "process", "window", "document"):
            value = _lookup(js, name)
            if value is not _MISSING and value is not None:
                env[name] = value
        return env

    env["process"] = SimpleNamespace(
        versions={"python": ".".join(str(part) for part in sys.version_info[:3])},
        platform=sys.platform,
    )
    if sys.platform in ("ios", "android"):
        env["navigator"] = SimpleNamespace(product=MOBILE_NATIVE_PRODUCT)
    return env


def detect_platform(env: Environment | None = None) -> PlatformInfo:
    """Classify the environment; recomputed on every call."""
    if env is None:
        env = current_environment()

    is_mobile_native = _is_mobile_native(env)
    is_managed_mobile = _is_managed_mobile(env)
    has_window = _exists(env, "window")
    is_server = _server_runtime_key(env) is not None and not has_window and not is_mobile_native
    is_browser = has_window and _exists(env, "document") and not is_mobile_native and not is_managed_mobile

    return PlatformInfo(
        is_server=is_server,
        is_mobile_native=is_mobile_native,
        is_browser=is_browser,
        is_managed_mobile=is_managed_mobile,
    )


def is_file_logging_available(env: Environment | None = None) -> bool:
    """File logging needs a server runtime."""
    return detect_platform(env).is_server


def get_platform_name(env: Environment | None = None) -> str:
    """Human-readable platform name, for diagnostics only."""
    if env is None:
        env = current_environment()
    platform = detect_platform(env)

    if platform.is_mobile_native:
        return "React Native"
    if platform.is_managed_mobile:
        return "Expo"
    if platform.is_server:
        return "Node.js" if _server_runtime_key(env) == "node" else "Python"
    if platform.is_browser:
        return "Browser"
    return "Unknown"
