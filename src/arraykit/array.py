"""Set-like, grouping and partitioning helpers for ordered sequences.

Every ``*_by`` helper decides uniqueness with a key selector whose results are
compared with ``==``; the plain variants use the items themselves as keys.
Only :func:`remove` and :func:`insert` modify their input.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, MutableSequence, Sequence, TypeVar

from .checks import (
    argument_is_callable,
    argument_is_mutable_sequence,
    argument_is_optional,
    argument_is_positive_int,
    argument_is_sequence,
    is_array,
)
from .errors import DuplicateKeyError
from .search import Comparator, insertion_index

logger = logging.getLogger(__name__)

T = TypeVar("T")
KeySelector = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


def _contains_key(keys: Sequence[Any], key: Any) -> bool:
    return any(key == candidate for candidate in keys)


def unique(a: Sequence[T]) -> list[T]:
    """Return the distinct items of *a* in first-occurrence order."""

    argument_is_sequence(a, "a")
    return unique_by(a, _identity)


def unique_by(a: Sequence[T], key_selector: KeySelector) -> list[T]:
    """Return the first item of *a* for each key produced by *key_selector*."""

    argument_is_sequence(a, "a")
    argument_is_callable(key_selector, "key_selector")

    seen: list[Any] = []
    result: list[T] = []
    for item in a:
        key = key_selector(item)
        if not _contains_key(seen, key):
            seen.append(key)
            result.append(item)
    return result


def group_by(a: Sequence[T], key_selector: Callable[[T], Hashable]) -> dict[Hashable, list[T]]:
    """Split *a* into lists keyed by *key_selector*.

    Unlike :func:`index_by`, many items may share a key.
    """

    argument_is_sequence(a, "a")
    argument_is_callable(key_selector, "key_selector")

    groups: dict[Hashable, list[T]] = {}
    for item in a:
        groups.setdefault(key_selector(item), []).append(item)
    return groups


def batch_by(a: Sequence[T], key_selector: KeySelector) -> list[list[T]]:
    """Split *a* into runs of adjacent items sharing a key."""

    argument_is_sequence(a, "a")
    argument_is_callable(key_selector, "key_selector")

    batches: list[list[T]] = []
    current_key: Any = None
    current_batch: list[T] | None = None
    for item in a:
        key = key_selector(item)
        if current_batch is None or current_key != key:
            current_key = key
            current_batch = []
            batches.append(current_batch)
        current_batch.append(item)
    return batches


def index_by(a: Sequence[T], key_selector: Callable[[T], Hashable]) -> dict[Hashable, T]:
    """Map each key produced by *key_selector* to its single item.

    Raises :class:`DuplicateKeyError` when two items share a key.
    """

    argument_is_sequence(a, "a")
    argument_is_callable(key_selector, "key_selector")

    index: dict[Hashable, T] = {}
    for item in a:
        key = key_selector(item)
        if key in index:
            logger.debug("index_by collision on key %r", key)
            raise DuplicateKeyError(key)
        index[key] = item
    return index


def drop_left(a: Sequence[T]) -> list[T]:
    """Return a copy of *a* without its first item."""

    argument_is_sequence(a, "a")
    return list(a[1:])


def drop_right(a: Sequence[T]) -> list[T]:
    """Return a copy of *a* without its last item."""

    argument_is_sequence(a, "a")
    return list(a[:-1])


def first(a: Sequence[T]) -> T | None:
    """Return the first item of *a*, or ``None`` when it is empty."""

    argument_is_sequence(a, "a")
    return a[0] if len(a) else None


def last(a: Sequence[T]) -> T | None:
    """Return the last item of *a*, or ``None`` when it is empty."""

    argument_is_sequence(a, "a")
    return a[-1] if len(a) else None


def flatten(a: Sequence[Any], recursive: bool | None = False) -> list[Any]:
    """Replace each nested list or tuple in *a* with its items.

    Only one level is removed unless *recursive* is true, in which case the
    result contains no nested lists or tuples at all.
    """

    argument_is_sequence(a, "a")
    argument_is_optional(recursive, "recursive", bool)

    flat = _flatten_once(a)
    while recursive and any(is_array(item) for item in flat):
        flat = _flatten_once(flat)
    return flat


def _flatten_once(a: Sequence[Any]) -> list[Any]:
    flat: list[Any] = []
    for item in a:
        if is_array(item):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def partition(a: Sequence[T], size: int) -> list[list[T]]:
    """Break *a* into consecutive chunks holding at most *size* items."""

    argument_is_sequence(a, "a")
    argument_is_positive_int(size, "size")

    return [list(a[offset : offset + size]) for offset in range(0, len(a), size)]


def difference(a: Sequence[T], b: Sequence[Any]) -> list[T]:
    """Return the items of *a* that do not occur in *b*."""

    return difference_by(a, b, _identity)


def difference_by(a: Sequence[T], b: Sequence[Any], key_selector: KeySelector) -> list[T]:
    """Return the items of *a* whose key matches no item of *b*."""

    argument_is_sequence(a, "a")
    argument_is_sequence(b, "b")
    argument_is_callable(key_selector, "key_selector")

    excluded = [key_selector(item) for item in b]
    return [item for item in a if not _contains_key(excluded, key_selector(item))]


def difference_symmetric(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return the items found in exactly one of *a* and *b*."""

    return difference_symmetric_by(a, b, _identity)


def difference_symmetric_by(a: Sequence[T], b: Sequence[T], key_selector: KeySelector) -> list[T]:
    """Union of ``a - b`` and ``b - a``, with keys taken from *key_selector*."""

    return union_by(
        difference_by(a, b, key_selector),
        difference_by(b, a, key_selector),
        key_selector,
    )


def union(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Return *a* followed by the items of *b* that *a* lacks."""

    return union_by(a, b, _identity)


def union_by(a: Sequence[T], b: Sequence[T], key_selector: KeySelector) -> list[T]:
    """Return *a* followed by each item of *b* whose key is not yet present.

    When keys collide the item seen first wins.
    """

    argument_is_sequence(a, "a")
    argument_is_sequence(b, "b")
    argument_is_callable(key_selector, "key_selector")

    result = list(a)
    keys = [key_selector(item) for item in result]
    for item in b:
        key = key_selector(item)
        if not _contains_key(keys, key):
            keys.append(key)
            result.append(item)
    return result


def intersection(a: Sequence[T], b: Sequence[Any]) -> list[T]:
    """Return the items of *a* that also occur in *b*."""

    return intersection_by(a, b, _identity)


def intersection_by(a: Sequence[T], b: Sequence[Any], key_selector: KeySelector) -> list[T]:
    """Return the items of *a* whose key matches some item of *b*."""

    argument_is_sequence(a, "a")
    argument_is_sequence(b, "b")
    argument_is_callable(key_selector, "key_selector")

    included = [key_selector(item) for item in b]
    return [item for item in a if _contains_key(included, key_selector(item))]


def remove(a: MutableSequence[T], predicate: Callable[[T], bool]) -> bool:
    """Delete the first item of *a* satisfying *predicate*, in place.

    Returns True when an item was removed.
    """

    argument_is_mutable_sequence(a, "a")
    argument_is_callable(predicate, "predicate")

    for index, item in enumerate(a):
        if predicate(item):
            del a[index]
            return True
    return False


def insert(a: MutableSequence[T], item: T, comparator: Comparator) -> MutableSequence[T]:
    """Insert *item* into the sorted sequence *a* and return *a*.

    *a* must already be sorted ascending according to *comparator*.
    """

    argument_is_mutable_sequence(a, "a")
    argument_is_callable(comparator, "comparator")

    index = insertion_index(a, item, comparator)
    logger.debug("inserting %r at position %d of %d", item, index, len(a))
    a.insert(index, item)
    return a
