"""
structlog bridge unit tests.
"""

from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock

import pytest

from omnilog.bridge import RedirectStdLibHandler, configure_logging, get_logger, reset_logging
from omnilog.levels import LevelPolicy
from omnilog.sinks.base import BaseSink
from omnilog.sinks.console import ConsoleSink


@pytest.fixture
def sink() -> MagicMock:
    return MagicMock(spec=BaseSink)


class TestStructlogRouting:
    """structlog events reach the sink method matching their level"""

    def test_info_with_context(self, sink) -> None:
        configure_logging(sink, capture_stdlib=False)
        get_logger("app").info("user logged in", user="bob", attempts=2)
        sink.info.assert_called_once_with("[app] user logged in user=bob attempts=2")

    def test_root_logger_has_no_prefix(self, sink) -> None:
        configure_logging(sink, capture_stdlib=False)
        get_logger().warning("disk almost full")
        sink.warn.assert_called_once_with("disk almost full")

    def test_level_methods(self, sink) -> None:
        configure_logging(sink, level="debug", capture_stdlib=False)
        logger = get_logger("svc")
        logger.debug("d")
        logger.error("e")
        logger.critical("c")
        sink.debug.assert_called_once_with("[svc] d")
        assert [c.args[0] for c in sink.error.call_args_list] == ["[svc] e", "[svc] c"]

    def test_filters_below_level(self, sink) -> None:
        configure_logging(sink, level="warn", capture_stdlib=False)
        logger = get_logger("svc")
        logger.info("quiet")
        logger.debug("quiet")
        logger.warning("loud")
        sink.info.assert_not_called()
        sink.debug.assert_not_called()
        sink.warn.assert_called_once_with("[svc] loud")

    def test_exception_includes_traceback(self, sink) -> None:
        configure_logging(sink, capture_stdlib=False)
        try:
            raise ValueError("kaboom")
        except ValueError:
            get_logger("svc").exception("handler failed")
        message = sink.error.call_args.args[0]
        assert message.startswith("[svc] handler failed\n")
        assert "Traceback" in message
        assert "ValueError: kaboom" in message

    def test_sink_failures_are_contained(self, sink) -> None:
        sink.info.side_effect = RuntimeError("sink broke")
        configure_logging(sink, capture_stdlib=False)
        get_logger("svc").info("still fine")
        sink.info.assert_called_once()

    def test_real_console_sink(self) -> None:
        out = io.StringIO()
        configure_logging(ConsoleSink(LevelPolicy(override="debug"), stream=out), capture_stdlib=False)
        get_logger("svc").info("ready", port=8080)
        assert out.getvalue() == "ℹ️ [svc] ready port=8080\n"


class TestStdlibCapture:
    """stdlib logging records are redirected"""

    def test_third_party_records(self, sink) -> None:
        configure_logging(sink, level="info")
        logging.getLogger("thirdparty.client").error("request failed: %s", 503)
        sink.error.assert_called_once_with("[thirdparty.client] request failed: 503")

    def test_respects_level(self, sink) -> None:
        configure_logging(sink, level="warn")
        logging.getLogger("thirdparty").info("noise")
        sink.info.assert_not_called()

    def test_custom_levels_round_down(self, sink) -> None:
        configure_logging(sink, level="info")
        logging.getLogger("thirdparty").log(25, "notice")
        logging.getLogger("thirdparty").log(45, "alert")
        sink.info.assert_called_once_with("[thirdparty] notice")
        sink.error.assert_called_once_with("[thirdparty] alert")

    def test_reconfigure_keeps_single_handler(self, sink) -> None:
        configure_logging(sink)
        configure_logging(sink)
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RedirectStdLibHandler)]
        assert len(handlers) == 1

    def test_reset_detaches(self, sink) -> None:
        root = logging.getLogger()
        level = root.level
        configure_logging(sink, level="debug")
        reset_logging()
        assert not any(isinstance(h, RedirectStdLibHandler) for h in root.handlers)
        assert root.level == level
        logging.getLogger("thirdparty").error("after reset")
        sink.error.assert_not_called()
