"""Migration - Moves project board items onto the roadmap board."""

from boardmigrator.migration.exceptions import (
    ConfigurationError,
    MigrationError,
    ProjectNotFoundError,
)
from boardmigrator.migration.models import (
    ItemOutcome,
    ItemResult,
    MigrationParams,
    MigrationReport,
)
from boardmigrator.migration.observer import LoggingObserver, MigrationObserver
from boardmigrator.migration.orchestrator import Migrator, run_migration

__all__ = [
    "ConfigurationError",
    "ItemOutcome",
    "ItemResult",
    "LoggingObserver",
    "MigrationError",
    "MigrationObserver",
    "MigrationParams",
    "MigrationReport",
    "Migrator",
    "ProjectNotFoundError",
    "run_migration",
]
