"""Exceptions raised by the hashed field pipeline"""

from typing import Any


class HashFieldError(Exception):
    """Base class for hashed field errors."""


class CastError(HashFieldError, ValueError):
    """A value has no canonical text form and cannot be hashed."""

    def __init__(self, value: Any, reason: str = None):
        self.value = value
        msg = f"Cannot cast {type(value).__name__} value to text"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class HashError(HashFieldError, ValueError):
    """The digest function rejected its input."""
