"""Unit tests for Board Migrator logging configuration."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest

from boardmigrator.gateway import client as gh_client
from boardmigrator.logging import get_logger, sanitize_for_log, setup_logging, truncate_output
from boardmigrator.migration import LoggingObserver, orchestrator
from boardmigrator.schema import validator


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir, console=False)

        assert log_dir.exists()
        assert (log_dir / "board-migrator.log").exists()

    def test_log_format(self, tmp_path: Path) -> None:
        """Entries carry level and component name."""
        setup_logging(log_dir=tmp_path, console=False)
        logging.getLogger("boardmigrator.gateway").info("format test")

        content = (tmp_path / "board-migrator.log").read_text()
        assert " | INFO" in content
        assert " | boardmigrator.gateway | format test" in content

    def test_log_level_configurable(self, tmp_path: Path) -> None:
        """Log level filters messages appropriately."""
        logger = setup_logging(log_dir=tmp_path, level="WARNING", console=False)
        logger.info("should not appear")
        logger.warning("should appear")

        content = (tmp_path / "board-migrator.log").read_text()
        assert "should not appear" not in content
        assert "should appear" in content

    def test_log_level_from_env(self, tmp_path: Path) -> None:
        """Log level can be set via environment variable."""
        with patch.dict(os.environ, {"BOARD_MIGRATOR_LOG_LEVEL": "DEBUG"}):
            logger = setup_logging(log_dir=tmp_path, console=False)

        assert logger.level == logging.DEBUG

    def test_log_dir_from_env(self, tmp_path: Path) -> None:
        """Log directory can be set via environment variable."""
        with patch.dict(os.environ, {"BOARD_MIGRATOR_LOG_DIR": str(tmp_path)}):
            setup_logging(console=False)

        assert (tmp_path / "board-migrator.log").exists()

    def test_console_uses_short_format(self, tmp_path: Path) -> None:
        """The console shows level and message only."""
        logger = setup_logging(log_dir=tmp_path)

        console = next(h for h in logger.handlers if not isinstance(h, RotatingFileHandler))
        record = logging.LogRecord("boardmigrator.gateway", logging.INFO, "", 0, "hi", None, None)
        assert console.format(record) == "INFO hi"

    def test_no_duplicate_handlers_on_repeated_setup(self, tmp_path: Path) -> None:
        """Repeated setup_logging calls don't add duplicate handlers."""
        setup_logging(log_dir=tmp_path, console=False)
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert logger.name == "boardmigrator"
        assert len(logger.handlers) == 2

    def test_rotation_configured(self, tmp_path: Path) -> None:
        """RotatingFileHandler is configured with the given limits."""
        logger = setup_logging(log_dir=tmp_path, max_bytes=1024, backup_count=3, console=False)

        file_handler = next(h for h in logger.handlers if isinstance(h, RotatingFileHandler))
        assert file_handler.maxBytes == 1024
        assert file_handler.backupCount == 3


@pytest.mark.unit
class TestHelpers:
    """Tests for get_logger, truncate_output and sanitize_for_log."""

    def test_get_logger_prefixes_package(self) -> None:
        assert get_logger("gateway").name == "boardmigrator.gateway"
        assert get_logger("boardmigrator.schema").name == "boardmigrator.schema"
        assert get_logger("boardmigrator").name == "boardmigrator"

    def test_components_log_under_package(self) -> None:
        """Component loggers are children of the configured logger."""
        assert gh_client.logger.name == "boardmigrator.gateway"
        assert validator.logger.name == "boardmigrator.schema"
        assert orchestrator.logger.name == "boardmigrator.migration"
        assert LoggingObserver().logger is orchestrator.logger

    def test_truncate_output(self) -> None:
        assert truncate_output("short text", max_length=100) == "short text"
        result = truncate_output("x" * 200, max_length=100)
        assert result.startswith("x" * 100)
        assert "100 more chars" in result

    @pytest.mark.parametrize(
        "token",
        [
            "gho_" + "a" * 36,
            "ghp_" + "B1" * 18,
            "ghs_" + "c" * 40,
            "ghu_" + "d" * 36,
            "github_pat_11ABCDEFG0123456789_" + "x" * 59,
        ],
    )
    def test_redacts_gh_tokens(self, token: str) -> None:
        text = f"error: {token} is not valid for gh project list"
        result = sanitize_for_log(text)
        assert token not in result
        assert result == "error: [GITHUB_TOKEN] is not valid for gh project list"

    def test_redacts_token_variables(self) -> None:
        result = sanitize_for_log("GH_TOKEN=abc123 GITHUB_TOKEN=def456 gh project list")
        assert result == "GH_TOKEN=[REDACTED] GITHUB_TOKEN=[REDACTED] gh project list"

    def test_safe_text_unchanged(self) -> None:
        text = "gh project item-list 301 --owner giantswarm -L 10000 --format json"
        assert sanitize_for_log(text) == text
