from __future__ import annotations

import re
from datetime import datetime, timezone

from omnilog.formatters import colorize, render_args, render_value, timestamp, with_marker
from omnilog.levels import Severity


def test_timestamp_is_iso8601_utc_millis():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", timestamp())


def test_render_value_variants():
    assert render_value("text") == "text"
    assert render_value(7) == "7"
    assert render_value({1: "a"}) == '{"1":"a"}'
    assert render_value(("a", 1)) == '["a",1]'
    assert render_value({"at": datetime(2024, 1, 2, tzinfo=timezone.utc)}) == '{"at":"2024-01-02T00:00:00Z"}'
    assert render_value({"obj": object}) == "{\"obj\":\"<class 'object'>\"}"
    assert render_value(KeyError()) == "KeyError"


def test_render_value_unserializable_falls_back_to_repr():
    huge = [2**70]
    assert render_value(huge) == repr(huge)


def test_render_args_joins_with_spaces():
    assert render_args("a", 1, None) == "a 1 None"
    assert render_args() == ""


def test_with_marker():
    assert with_marker(None, "plain") == "plain"
    assert with_marker(Severity.WARN, "w") == "⚠️ w"
    assert with_marker(Severity.ERROR, "") == "❌"


def test_colorize():
    assert colorize("x", "error") == "\033[31mx\033[0m"
    assert colorize("x", "unknown") == "x\033[0m"
