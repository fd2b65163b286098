"""Custom exceptions for the GitHub CLI gateway."""


class GatewayError(Exception):
    """Base exception for gateway errors."""


class CommandError(GatewayError):
    """A ``gh`` invocation failed, could not be started or timed out."""

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr


class ResponseParseError(GatewayError):
    """``gh`` output is not valid JSON or does not have the expected shape."""
