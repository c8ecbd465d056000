"""Utility helpers."""

from __future__ import annotations

import logging

from .config import load_settings


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for scripts using this package.

    The level defaults to ``ARRAYKIT_LOG_LEVEL``.
    """

    if level is None:
        level = load_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level)
