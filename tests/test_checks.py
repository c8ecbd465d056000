from __future__ import annotations

import pytest

from arraykit.checks import (
    argument_is_callable,
    argument_is_mutable_sequence,
    argument_is_optional,
    argument_is_positive_int,
    argument_is_sequence,
    is_array,
    is_sequence,
)
from arraykit.errors import ArgumentError, ArraykitError


def test_is_sequence_excludes_text():
    assert is_sequence([1])
    assert is_sequence((1,))
    assert is_sequence(range(3))
    assert not is_sequence("abc")
    assert not is_sequence(b"abc")
    assert not is_sequence({1, 2})


def test_is_array_only_lists_and_tuples():
    assert is_array([1])
    assert is_array(())
    assert not is_array(range(2))
    assert not is_array("ab")


def test_argument_error_names_the_argument():
    with pytest.raises(ArgumentError) as excinfo:
        argument_is_sequence(5, "values")
    assert excinfo.value.name == "values"
    assert '"values"' in str(excinfo.value)
    assert isinstance(excinfo.value, ArraykitError)


def test_mutable_sequence_check():
    argument_is_mutable_sequence([], "a")
    with pytest.raises(ArgumentError):
        argument_is_mutable_sequence((), "a")


def test_callable_check():
    argument_is_callable(len, "fn")
    with pytest.raises(ArgumentError, match="is required"):
        argument_is_callable(None, "fn")


def test_optional_check():
    argument_is_optional(None, "n", int)
    argument_is_optional(3, "n", int)
    argument_is_optional(True, "flag", bool)
    with pytest.raises(ArgumentError):
        argument_is_optional(False, "n", int)
    with pytest.raises(ArgumentError, match="int or float"):
        argument_is_optional("1", "n", (int, float))


def test_positive_int_check():
    argument_is_positive_int(1, "size")
    with pytest.raises(ArgumentError, match="must be positive"):
        argument_is_positive_int(0, "size")


def test_range_failures_are_value_errors():
    with pytest.raises(ValueError):
        argument_is_positive_int(0, "size")
    with pytest.raises(TypeError):
        argument_is_positive_int("2", "size")
