"""Exception types raised by arraykit."""

from __future__ import annotations

from typing import Any


class ArraykitError(Exception):
    """Base class for errors raised by this package."""


class ArgumentError(ArraykitError, TypeError, ValueError):
    """Raised when an argument is missing, has the wrong shape or is out of range."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"The \"{name}\" argument {message}")
        self.name = name


class DuplicateKeyError(ArraykitError, ValueError):
    """Raised by :func:`arraykit.array.index_by` when two items share a key."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Unable to index sequence. A duplicate key exists: {key!r}")
        self.key = key
