"""Tests for the structlog renderer and configuration."""

import json

import pytest
import structlog

from glossa.logging import GlossaRenderer, configure_logging, get_logger


class TestGlossaRenderer:
    """Test line formatting without colors."""

    def test_plain_line(self) -> None:
        renderer = GlossaRenderer(colors=False)
        line = renderer(
            None,
            "info",
            {"event": "scan complete", "timestamp": "12:00:00", "level": "info", "files": 3},
        )
        assert line == "12:00:00 | info  | scan complete files=3"

    def test_private_keys_hidden(self) -> None:
        renderer = GlossaRenderer(colors=False)
        line = renderer(None, "debug", {"event": "x", "timestamp": "t", "_record": object()})
        assert line == "t | debug | x"

    def test_colored_numbers(self) -> None:
        renderer = GlossaRenderer(colors=True)
        line = renderer(None, "info", {"event": "x", "timestamp": "t", "missing": 2})
        assert "\033[" in line
        assert "missing=" in line

    def test_exception_rendered(self) -> None:
        renderer = GlossaRenderer(colors=False)
        try:
            raise ValueError("boom")
        except ValueError:
            line = renderer(None, "error", {"event": "failed", "timestamp": "t", "exc_info": True})
        assert "ValueError: boom" in line

    def test_exception_instance_rendered(self) -> None:
        renderer = GlossaRenderer(colors=False)
        try:
            raise ValueError("boom")
        except ValueError as e:
            caught = e
        line = renderer(None, "debug", {"event": "failed", "timestamp": "t", "exc_info": caught})
        assert "ValueError: boom" in line
        assert "raise ValueError" in line


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING", colors=False)
        log = get_logger("test")
        log.debug("hidden")
        log.warning("shown", path="a.py")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown path=a.py" in err

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="DEBUG", json_output=True)
        get_logger("test").debug("format failed", format="flat-json")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["event"] == "format failed"
        assert data["format"] == "flat-json"
        assert data["level"] == "debug"

    def test_logs_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", colors=False)
        structlog.get_logger().info("hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello" in captured.err
