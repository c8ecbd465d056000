"""Type predicates and argument assertions shared by the public helpers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

from .errors import ArgumentError

_TEXT_TYPES = (str, bytes, bytearray)


def is_sequence(value: Any) -> bool:
    """Return True for ordered sequences, excluding text and binary strings."""

    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_array(value: Any) -> bool:
    """Return True for values that ``flatten`` treats as nested items."""

    return isinstance(value, (list, tuple))


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def argument_is_sequence(value: Any, name: str) -> None:
    if not is_sequence(value):
        raise ArgumentError(name, f"must be a sequence, got {type(value).__name__}")


def argument_is_mutable_sequence(value: Any, name: str) -> None:
    if not isinstance(value, MutableSequence):
        raise ArgumentError(name, f"must be a mutable sequence, got {type(value).__name__}")


def argument_is_callable(value: Any, name: str) -> None:
    if value is None:
        raise ArgumentError(name, "is required")
    if not callable(value):
        raise ArgumentError(name, f"must be callable, got {type(value).__name__}")


def argument_is_optional(value: Any, name: str, expected: type | tuple[type, ...]) -> None:
    """Accept ``None`` or an instance of *expected* (bools are never integers here)."""

    if value is None:
        return
    if isinstance(value, bool) and expected is int:
        raise ArgumentError(name, "must be an integer, got bool")
    if not isinstance(value, expected):
        raise ArgumentError(name, f"must be of type {_type_names(expected)}, got {type(value).__name__}")


def argument_is_positive_int(value: Any, name: str) -> None:
    if value is None:
        raise ArgumentError(name, "is required")
    if not is_integer(value):
        raise ArgumentError(name, f"must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ArgumentError(name, f"must be positive, got {value}")


def _type_names(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(item.__name__ for item in expected)
    return expected.__name__
