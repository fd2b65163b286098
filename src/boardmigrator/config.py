"""Configuration loading for Board Migrator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "board-migrator.yaml"

DEFAULT_OWNER = "giantswarm"
DEFAULT_ROADMAP_NUMBER = 273
DEFAULT_ROADMAP_PROJECT_ID = "PVT_kwDOAHNM9M4ABvWx"
DEFAULT_GH_LIMIT = 10000


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class RoadmapConfig:
    """Destination (roadmap) board.

    An empty project_id is resolved from the project listing at run time.
    """

    number: int = DEFAULT_ROADMAP_NUMBER
    project_id: str = DEFAULT_ROADMAP_PROJECT_ID


@dataclass
class GhConfig:
    """Settings for invoking the GitHub CLI."""

    executable: str = "gh"
    limit: int = DEFAULT_GH_LIMIT
    timeout: float | None = None


@dataclass
class MigratorConfig:
    """Board Migrator configuration."""

    owner: str = DEFAULT_OWNER
    roadmap: RoadmapConfig = field(default_factory=RoadmapConfig)
    gh: GhConfig = field(default_factory=GhConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MigratorConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        roadmap_data = _section(data, "roadmap")
        number = _int(roadmap_data.get("number", DEFAULT_ROADMAP_NUMBER), "roadmap.number")
        if "project_id" in roadmap_data:
            project_id = str(roadmap_data["project_id"] or "")
        else:
            # The built-in ID only belongs to the default roadmap
            project_id = DEFAULT_ROADMAP_PROJECT_ID if number == DEFAULT_ROADMAP_NUMBER else ""
        roadmap = RoadmapConfig(number=number, project_id=project_id)

        gh_data = _section(data, "gh")
        timeout = gh_data.get("timeout")
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, int | float)
        ):
            raise ConfigError(f"gh.timeout must be a number of seconds, got {timeout!r}")
        gh = GhConfig(
            executable=str(gh_data.get("executable", "gh")),
            limit=_int(gh_data.get("limit", DEFAULT_GH_LIMIT), "gh.limit"),
            timeout=float(timeout) if timeout is not None else None,
        )

        return cls(
            owner=str(data.get("owner", DEFAULT_OWNER)),
            roadmap=roadmap,
            gh=gh,
        )

    def apply_env(self) -> MigratorConfig:
        """Apply BOARD_MIGRATOR_* environment overrides in place."""
        owner = os.environ.get("BOARD_MIGRATOR_OWNER")
        if owner:
            self.owner = owner
        roadmap = os.environ.get("BOARD_MIGRATOR_ROADMAP")
        if roadmap:
            number = _int(roadmap, "BOARD_MIGRATOR_ROADMAP")
            if number != self.roadmap.number:
                self.roadmap.number = number
                self.roadmap.project_id = ""
        return self


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def load_config(config_path: Path | str | None = None) -> MigratorConfig:
    """Load Board Migrator configuration from a YAML file.

    Args:
        config_path: Path to board-migrator.yaml. When None, the file is
            searched for from the current directory upwards and defaults are
            used if none exists.

    Returns:
        Parsed configuration object with environment overrides applied.

    Raises:
        ConfigError: If an explicit file doesn't exist or any file is invalid.
    """
    if config_path is None:
        found = find_config()
        if found is None:
            return MigratorConfig().apply_env()
        config_path = found

    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return MigratorConfig.from_dict(data).apply_env()


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find board-migrator.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to the config file, or None if there is none.
    """
    start = Path.cwd() if start_path is None else Path(start_path)
    current = start.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    return None
