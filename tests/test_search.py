from __future__ import annotations

import pytest

from arraykit.errors import ArgumentError
from arraykit.search import binary_search, insertion_index


def compare(key, candidate):
    return key - candidate


ODD = [1, 3, 5, 7, 9]
EVEN = [2, 4, 6, 8, 10, 12]


def test_binary_search_finds_present_key():
    assert binary_search(ODD, 5, compare) == 5


def test_binary_search_returns_none_for_missing_key():
    assert binary_search(ODD, 4, compare) is None
    assert binary_search(ODD, 0, compare) is None
    assert binary_search(ODD, 10, compare) is None
    assert binary_search([], 1, compare) is None


@pytest.mark.parametrize("values", [ODD, EVEN, [7], [1, 2]])
def test_binary_search_finds_every_item(values):
    for value in values:
        assert binary_search(values, value, compare) == value


def test_binary_search_with_record_keys():
    records = [{"id": 10, "name": "a"}, {"id": 20, "name": "b"}, {"id": 30, "name": "c"}]
    found = binary_search(records, 30, lambda key, record: key - record["id"])
    assert found == {"id": 30, "name": "c"}


def test_binary_search_respects_bounds():
    assert binary_search(ODD, 9, compare, 0, 2) is None
    assert binary_search(ODD, 1, compare, 3) is None
    assert binary_search(ODD, 7, compare, 2, 4) == 7
    assert binary_search(ODD, 1, compare, 0, 0) == 1


@pytest.mark.parametrize(("start", "end"), [(-1, None), (5, None), (0, 5), (3, 1), (1.0, None), (True, None)])
def test_binary_search_rejects_bad_bounds(start, end):
    with pytest.raises(ArgumentError):
        binary_search(ODD, 3, compare, start, end)


def test_binary_search_requires_comparator():
    with pytest.raises(ArgumentError):
        binary_search(ODD, 3, None)


def test_insertion_index_edges():
    assert insertion_index([], 3, compare) == 0
    assert insertion_index([1, 3, 5], 0, compare) == 0
    assert insertion_index([1, 3, 5], 6, compare) == 3
    assert insertion_index([1, 3, 5], 5, compare) == 3


def test_insertion_index_bisects_interior():
    assert insertion_index([1, 3, 5], 4, compare) == 2
    assert insertion_index([1, 3, 5, 7, 9, 11], 8, compare) == 4
    assert insertion_index([1, 3, 5, 7, 9, 11], 2, compare) == 1


def test_insertion_index_tie_inside_run_lands_before_equal_items():
    # Only ties with the last item are appended after it.
    assert insertion_index([1, 3, 3, 5], 3, compare) == 1


def test_out_of_range_bounds_can_be_caught_as_value_error():
    with pytest.raises(ValueError):
        binary_search(ODD, 3, compare, 0, 9)
