from __future__ import annotations

from types import SimpleNamespace

import pytest

from omnilog import bridge
from omnilog.levels import default_policy


@pytest.fixture(autouse=True)
def reset_logging_state(monkeypatch):
    """
    Keeps process-wide logging state from leaking between tests.
    """
    monkeypatch.delenv("CONSOLE_LEVEL", raising=False)
    monkeypatch.delenv("OMNILOG_CONSOLE_LEVEL", raising=False)
    default_policy.set_threshold("info")
    yield
    default_policy.reset()
    bridge.reset_logging()


@pytest.fixture
def node_env() -> dict:
    return {"process": SimpleNamespace(versions={"node": "20.11.0"})}


@pytest.fixture
def python_env() -> dict:
    return {"process": SimpleNamespace(versions={"python": "3.12.1"})}


@pytest.fixture
def browser_env() -> dict:
    return {"window": SimpleNamespace(), "document": SimpleNamespace()}


@pytest.fixture
def react_native_env() -> dict:
    return {
        "navigator": SimpleNamespace(product="ReactNative"),
        "process": SimpleNamespace(versions={"node": "20.11.0"}),
    }


@pytest.fixture
def expo_env() -> dict:
    return {"expo": SimpleNamespace(Constants={"appOwnership": "expo"})}


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"
