"""Binary search lookup and sorted-insertion positioning."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, TypeVar

from .checks import argument_is_callable, argument_is_optional, argument_is_sequence
from .errors import ArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
Comparator = Callable[[Any, Any], float]


def binary_search(
    a: Sequence[T],
    key: Any,
    comparator: Comparator,
    start: int | None = None,
    end: int | None = None,
) -> T | None:
    """Locate an item in the sorted sequence *a* by bisection.

    ``comparator(key, candidate)`` must return a negative number when *key*
    sorts before *candidate*, zero on a match and a positive number otherwise.
    The search covers the inclusive range ``[start, end]``, which defaults to
    the whole sequence. Returns the first matching item found, or ``None``.
    """

    argument_is_sequence(a, "a")
    argument_is_callable(comparator, "comparator")
    argument_is_optional(start, "start", int)
    argument_is_optional(end, "end", int)

    if len(a) == 0:
        return None

    lower = 0 if start is None else start
    upper = len(a) - 1 if end is None else end
    _check_bounds(a, lower, upper)

    return _search_for_match(a, key, comparator, lower, upper)


def insertion_index(a: Sequence[T], item: T, comparator: Comparator) -> int:
    """Return the index at which *item* keeps the ascending sequence *a* sorted.

    Items that do not sort before the last element are appended and items that
    sort before the first element are prepended; everything else is placed by
    bisection.
    """

    argument_is_sequence(a, "a")
    argument_is_callable(comparator, "comparator")

    if len(a) == 0 or not comparator(item, a[-1]) < 0:
        return len(a)
    if comparator(item, a[0]) < 0:
        return 0
    return _search_for_insert(a, item, comparator, 0, len(a) - 1)


def _check_bounds(a: Sequence[Any], start: int, end: int) -> None:
    if not 0 <= start < len(a):
        raise ArgumentError("start", f"must be within [0, {len(a) - 1}], got {start}")
    if not start <= end < len(a):
        raise ArgumentError("end", f"must be within [{start}, {len(a) - 1}], got {end}")


def _search_for_match(a: Sequence[T], key: Any, comparator: Comparator, start: int, end: int) -> T | None:
    size = end - start
    midpoint = start + size // 2
    candidate = a[midpoint]

    comparison = comparator(key, candidate)

    if comparison == 0:
        return candidate
    if size < 2:
        # A two-item range only probes its lower item.
        final = len(a) - 1
        if end == final and comparator(key, a[final]) == 0:
            return a[final]
        logger.debug("binary search miss for %r in [%d, %d]", key, start, end)
        return None
    if comparison > 0:
        return _search_for_match(a, key, comparator, midpoint, end)
    return _search_for_match(a, key, comparator, start, midpoint)


def _search_for_insert(a: Sequence[T], item: T, comparator: Comparator, start: int, end: int) -> int:
    size = end - start
    midpoint = start + size // 2

    greater = comparator(item, a[midpoint]) > 0

    if size < 2:
        if not greater:
            return start
        final = len(a) - 1
        if end == final and comparator(item, a[final]) > 0:
            return end + 1
        return end
    if greater:
        return _search_for_insert(a, item, comparator, midpoint, end)
    return _search_for_insert(a, item, comparator, start, midpoint)
