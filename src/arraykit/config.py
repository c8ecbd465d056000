"""Configuration helpers: YAML-backed defaults and environment settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS: dict[str, Any] = {
    "json": {"sort_keys": False, "ensure_ascii": True},
    "logging": {"level": "WARNING"},
}

# (section, key) -> environment alias of the matching settings field
_FIELD_ALIASES: dict[tuple[str, str], str] = {
    ("json", "sort_keys"): "ARRAYKIT_JSON_SORT_KEYS",
    ("json", "ensure_ascii"): "ARRAYKIT_JSON_ENSURE_ASCII",
    ("logging", "level"): "ARRAYKIT_LOG_LEVEL",
}


def _read_sections(path: str | Path | None, overrides: dict[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Return the sections given by a YAML file and overrides, overrides winning per key."""

    sections: dict[str, dict[str, Any]] = {}
    layers: list[dict[str, Any]] = []
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        layers.append(file_cfg)
    if overrides:
        layers.append(overrides)
    for layer in layers:
        for section, values in layer.items():
            if not isinstance(values, dict):
                raise ValueError(f"Configuration section {section!r} must be a mapping")
            sections.setdefault(section, {}).update(values)
    return sections


def load_config(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return ``DEFAULTS`` with an optional YAML file and overrides applied."""

    config = {section: dict(values) for section, values in DEFAULTS.items()}
    for section, values in _read_sections(path, overrides).items():
        config.setdefault(section, {}).update(values)
    return config


class ArraykitSettings(BaseSettings):
    """Environment driven settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    json_sort_keys: bool = Field(default=DEFAULTS["json"]["sort_keys"], alias="ARRAYKIT_JSON_SORT_KEYS")
    json_ensure_ascii: bool = Field(default=DEFAULTS["json"]["ensure_ascii"], alias="ARRAYKIT_JSON_ENSURE_ASCII")
    log_level: str = Field(default=DEFAULTS["logging"]["level"], alias="ARRAYKIT_LOG_LEVEL")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ArraykitSettings":
        """Build settings from a dict shaped like ``DEFAULTS``.

        Keys missing from *config* fall back to the environment.
        """

        values = {
            alias: config[section][key]
            for (section, key), alias in _FIELD_ALIASES.items()
            if key in config.get(section, {})
        }
        return cls(**values)


def load_settings(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> ArraykitSettings:
    """Return settings from the environment, a YAML file and overrides, in rising priority."""

    return ArraykitSettings.from_config(_read_sections(path, overrides))
