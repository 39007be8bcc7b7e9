"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from docbind.config.models import LoggingConfig, LogOutputConfig
from docbind.core.logging import configure_logging, get_log_file_path, get_logger


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def teardown_method(self) -> None:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
        structlog.reset_defaults()

    def test_given_json_format_when_log_then_valid_json_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        lines = [line for line in captured.err.strip().split("\n") if line]
        if lines:
            data = json.loads(lines[-1])
            assert data["event"] == "test message"
            assert data["key"] == "value"
            assert data["logger"] == "test"
            assert "timestamp" in data
            assert data["level"] == "info"

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content

        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_file_output_when_configure_then_tracks_log_file(self, tmp_path: Path) -> None:
        """The first file destination is remembered for error pointers."""
        log_file = tmp_path / "nested" / "docbind.log"
        config = LoggingConfig(outputs=[LogOutputConfig(destination=str(log_file))])

        configure_logging(config=config)

        assert get_log_file_path() == log_file
        assert log_file.parent.is_dir()

    def test_given_console_only_when_configure_then_no_log_file(self) -> None:
        configure_logging(level="INFO")

        assert get_log_file_path() is None

    def test_given_logger_created_before_configure_when_log_then_configuration_applies(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Module-level loggers pick up the configuration made later."""
        # Given
        early = get_logger("docbind.early")
        log_file = tmp_path / "early.log"
        configure_logging(
            config=LoggingConfig(
                level="INFO",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        early.debug("below level")
        early.info("at level")

        # Then
        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert [r["event"] for r in records] == ["at level"]
        assert records[0]["logger"] == "docbind.early"
        assert capsys.readouterr().out == ""
