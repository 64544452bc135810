"""Error types raised by the orgunits package."""

from __future__ import annotations


class OrgUnitError(Exception):
    """Base class for all orgunits errors."""


class InvalidFormatError(OrgUnitError, ValueError):
    """An organizational unit string (or node list) is malformed.

    Raised when a node is empty or whitespace-only anywhere other than a
    whole-string base alias match.  ``value`` holds the rejected input.
    """

    def __init__(self, value: object, reason: str = "empty or whitespace-only node") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid organizational unit {value!r}: {reason}")


class ConfigError(OrgUnitError):
    """An orgunits configuration file could not be read."""
