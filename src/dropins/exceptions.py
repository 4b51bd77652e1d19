"""Exception hierarchy for the dropins utilities."""

from __future__ import annotations


class DropinsError(Exception):
    """Base class for all errors raised by dropins."""


class InvalidArgumentError(DropinsError, TypeError, ValueError):
    """Raised when a caller passes an argument of the wrong type or shape."""


class ConfigValidationError(DropinsError):
    """Raised when configuration cannot be validated safely."""
