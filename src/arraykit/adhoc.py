"""Serialization container for ad hoc data."""

from __future__ import annotations

import json
import logging
from typing import Any

from .config import ArraykitSettings
from .errors import ArgumentError

logger = logging.getLogger(__name__)

Structured = dict[str, Any] | list[Any]


class AdHoc:
    """Wraps a JSON-compatible structure so it can travel as a JSON string.

    A missing or empty scalar (``None``, ``False``, ``0``, ``""``) becomes an
    empty dict. Unlike the ``data`` setter, the constructor does not reject
    other scalars, so ``AdHoc.parse("5").data == 5``.
    """

    def __init__(self, data: Any = None) -> None:
        if not data and not isinstance(data, (dict, list)):
            data = {}
        self._data: Any = data

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, data: Structured) -> None:
        if data is None:
            raise ArgumentError("data", "is required")
        if not isinstance(data, (dict, list)):
            raise ArgumentError("data", f"must be a dict or list, got {type(data).__name__}")
        self._data = data

    def to_json(self, settings: ArraykitSettings | None = None) -> str:
        """Return the data encoded as a JSON string.

        Without *settings* this is exactly ``json.dumps(self.data)``; formatting
        options apply only when settings are passed in.
        """

        if settings is None:
            return json.dumps(self._data)
        return json.dumps(
            self._data,
            sort_keys=settings.json_sort_keys,
            ensure_ascii=settings.json_ensure_ascii,
        )

    @classmethod
    def parse(cls, serialized: str) -> "AdHoc":
        """Build a container from a JSON string.

        Decoding errors propagate as :class:`json.JSONDecodeError`.
        """

        try:
            data = json.loads(serialized)
        except json.JSONDecodeError as exc:
            logger.debug("ad hoc payload is not valid JSON", exc_info=exc)
            raise
        return cls(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdHoc):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AdHoc({self._data!r})"

    def __str__(self) -> str:
        return "[AdHoc]"


def serialize(container: AdHoc) -> str:
    if not isinstance(container, AdHoc):
        raise ArgumentError("container", f"must be an AdHoc, got {type(container).__name__}")
    return container.to_json()


def deserialize(serialized: str) -> AdHoc:
    return AdHoc.parse(serialized)
