"""Unit tests for logging setup."""

import json

import pytest
import structlog

from srtclean.utils.logging import setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_output(self, capsys):
        """Should render events with their key/value context."""
        setup_logging("INFO")

        structlog.get_logger().info("srt_written", entries=3)

        out = capsys.readouterr().out
        assert "srt_written" in out
        assert "entries=3" in out

    def test_level_filtering(self, capsys):
        """Should drop events below the configured level."""
        setup_logging("warning")

        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("shown_event")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out

    def test_json_output(self, capsys):
        """Should emit one JSON object per event."""
        setup_logging("DEBUG", json_logs=True)

        structlog.get_logger().debug("srt_parsed", entries=2, skipped=1)

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "srt_parsed"
        assert record["entries"] == 2
        assert record["skipped"] == 1
        assert record["level"] == "debug"

    def test_unknown_level_raises_error(self):
        """Should reject unknown level names."""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("LOUD")
