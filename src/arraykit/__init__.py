"""arraykit public package exports."""

from .adhoc import AdHoc, deserialize, serialize
from .array import (
    batch_by,
    difference,
    difference_by,
    difference_symmetric,
    difference_symmetric_by,
    drop_left,
    drop_right,
    first,
    flatten,
    group_by,
    index_by,
    insert,
    intersection,
    intersection_by,
    last,
    partition,
    remove,
    union,
    union_by,
    unique,
    unique_by,
)
from .config import ArraykitSettings, load_config, load_settings
from .errors import ArgumentError, ArraykitError, DuplicateKeyError
from .search import binary_search, insertion_index
from .utils import configure_logging

__all__ = [
    "AdHoc",
    "ArgumentError",
    "ArraykitError",
    "ArraykitSettings",
    "DuplicateKeyError",
    "batch_by",
    "binary_search",
    "configure_logging",
    "deserialize",
    "difference",
    "difference_by",
    "difference_symmetric",
    "difference_symmetric_by",
    "drop_left",
    "drop_right",
    "first",
    "flatten",
    "group_by",
    "index_by",
    "insert",
    "insertion_index",
    "intersection",
    "intersection_by",
    "last",
    "load_config",
    "load_settings",
    "partition",
    "remove",
    "serialize",
    "union",
    "union_by",
    "unique",
    "unique_by",
]
