"""Exception hierarchy for activity and registry loading."""

from typing import Optional


class ServiceIntervalError(Exception):
    """Base exception for all service interval failures."""


class MalformedRowError(ServiceIntervalError):
    """A single activity row failed validation."""

    def __init__(
        self,
        row_number: int,
        column: str,
        reason: str,
        value: Optional[str] = None,
    ):
        self.row_number = row_number
        self.column = column
        self.reason = reason
        self.value = value
        super().__init__(f"Row {row_number}: {column}: {reason} (got {value!r})")


class FormatError(ServiceIntervalError):
    """A document could not be decoded as a whole."""


class ActivityFormatError(FormatError):
    """Invalid activity file format or contents."""


class RegistryFormatError(FormatError):
    """Invalid registry file format or contents."""


class ResourceError(ServiceIntervalError):
    """A file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f'IO error for path "{path}": {reason}')


class UnknownError(ServiceIntervalError):
    """Unexpected failure that fits no other category."""
