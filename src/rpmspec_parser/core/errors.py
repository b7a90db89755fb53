"""
Error types raised while reading and parsing spec files.

Absence of a macro or tag is never an error; lookups return None.
"""


class SpecError(Exception):
    """Base class for all spec parsing failures."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class SpecNotFoundError(SpecError, FileNotFoundError):
    """The spec file does not exist or cannot be opened."""


class InvalidSpecError(SpecError):
    """The spec file violates a structural rule; the whole parse is rejected."""

    def __init__(self, message: str, path: str | None = None, header: str | None = None):
        self.header = header
        if header:
            message = f"{message} (section {header!r})"
        super().__init__(message, path)
