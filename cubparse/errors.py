"""Error type and error-report formatting for scene parsing."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when a scene file or its contents are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def report(self) -> str:
        """Return the error as it is shown to the user."""
        return format_error(self.message)


def format_error(message: str) -> str:
    """Format *message* as an error report: a header line, then the message."""
    return f"ERROR\n{message}\n"