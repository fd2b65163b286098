"""Logging setup for Board Migrator.

The full record of a run goes to a rotating log file. The console gets a
short form, since progress output and the final summary share the terminal.
"""

from __future__ import annotations

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "board-migrator.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

ROOT_LOGGER = "boardmigrator"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Token shapes gh can echo back: OAuth (gho_), personal (ghp_), user-to-server
# (ghu_), server-to-server (ghs_), refresh (ghr_) and fine-grained PATs.
_GH_TOKEN = re.compile(r"\b(?:gh[opusr]_[A-Za-z0-9]{36,}|github_pat_[A-Za-z0-9_]{22,})")
# GH_TOKEN=..., GITHUB_TOKEN=..., GH_ENTERPRISE_TOKEN=... in echoed environments
_TOKEN_VAR = re.compile(r"\b((?:GH|GITHUB|GH_ENTERPRISE|GITHUB_ENTERPRISE)_TOKEN=)\S+")


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``boardmigrator`` logger for a run.

    Args:
        log_dir: Directory for log files. Defaults to BOARD_MIGRATOR_LOG_DIR,
                 then 'logs' in the current directory.
        log_file: Log file name.
        max_bytes: Size at which the log file is rotated.
        backup_count: Number of rotated files to keep.
        level: Log level name. Defaults to BOARD_MIGRATOR_LOG_LEVEL, then INFO.
        console: Also log to stderr in the short console format.

    Returns:
        The ``boardmigrator`` logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("BOARD_MIGRATOR_LOG_DIR", DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if level is None:
        level = os.environ.get("BOARD_MIGRATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    log_path = log_dir / log_file
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    logger.debug("Logging to %s at %s", log_path, logging.getLevelName(log_level))
    return logger


def get_logger(component: str) -> logging.Logger:
    """Return the logger of a component, e.g. ``get_logger("gateway")``."""
    if component == ROOT_LOGGER or component.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(component)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def truncate_output(output: str, max_length: int = 2000) -> str:
    """Shorten gh output for the log; item listings can run to megabytes."""
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Redact GitHub tokens from a gh command line or its output."""
    text = _GH_TOKEN.sub("[GITHUB_TOKEN]", text)
    return _TOKEN_VAR.sub(r"\1[REDACTED]", text)
