"""Custom exceptions for schema handling."""


class SchemaError(Exception):
    """Base exception for schema errors."""


class SchemaValidationError(SchemaError):
    """Source and roadmap schemas are incompatible.

    Carries every problem found so they can all be fixed in one pass.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))
