"""Exceptions for the Migration module."""


class MigrationError(Exception):
    """Base exception for errors that abort a migration run."""


class ConfigurationError(MigrationError):
    """Migration parameters are missing or invalid."""


class ProjectNotFoundError(MigrationError):
    """A project number is not among the owner's projects."""
