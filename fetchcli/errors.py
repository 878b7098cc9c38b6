"""
Error types for fetchcli.

Every reader raises one of these; the CLI catches FetchError, prints a
one-line diagnostic and exits non-zero before anything is rendered.
"""


class FetchError(Exception):
    """Base class. `operation` names the reader that failed."""

    def __init__(self, message, operation=None):
        super().__init__(message)
        self.operation = operation


class SourceUnavailableError(FetchError):
    """A required file could not be opened or a command could not be spawned."""
    pass


class MissingFieldError(FetchError):
    """A required key was absent from a parsed field table."""

    def __init__(self, key, source=None, operation=None):
        where = f" in {source}" if source else ""
        super().__init__(f"required field '{key}' not found{where}", operation=operation)
        self.key = key
        self.source = source


class FieldParseError(FetchError):
    """A field value could not be converted to the expected type."""
    pass


class SystemCallError(FetchError):
    """A platform call failed; `errno` holds the platform error code."""

    def __init__(self, message, errno=None, operation=None):
        super().__init__(message, operation=operation)
        self.errno = errno


__all__ = [
    "FetchError",
    "SourceUnavailableError",
    "MissingFieldError",
    "FieldParseError",
    "SystemCallError",
]
