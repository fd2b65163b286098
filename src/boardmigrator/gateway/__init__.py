"""Gateway - Runs GitHub CLI project commands."""

from boardmigrator.gateway.client import GhClient
from boardmigrator.gateway.exceptions import CommandError, GatewayError, ResponseParseError

__all__ = [
    "CommandError",
    "GatewayError",
    "GhClient",
    "ResponseParseError",
]
