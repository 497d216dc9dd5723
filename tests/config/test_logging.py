"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest

from timelang.config.logging import MAX_LOGGED_TEXT, clip_text, configure_logging, get_logger


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("timelang").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("timelang").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("test").debug("parse.start", node="date")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "parse.start"
        assert parsed["node"] == "date"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "timelang.test"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        get_logger("test").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_stdout_untouched(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("test").warning("to stderr")
        assert capfd.readouterr().out == ""


class TestGetLogger:
    def test_namespaced(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("timelang.services.expression").info("ok")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "timelang.services.expression"


class TestClipText:
    def test_short_text_untouched(self) -> None:
        event = clip_text(None, "debug", {"event": "parse.start", "text": "now"})
        assert event == {"event": "parse.start", "text": "now"}

    def test_long_text_clipped(self) -> None:
        text = "1 day and " * 20
        event = clip_text(None, "debug", {"event": "parse.start", "text": text})
        assert len(event["text"]) == MAX_LOGGED_TEXT
        assert event["text"].endswith("...")
        assert event["text_length"] == len(text)

    def test_applied_to_emitted_events(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        get_logger("test").debug("parse.start", text="x" * 200)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["text_length"] == 200
        assert len(parsed["text"]) == MAX_LOGGED_TEXT
