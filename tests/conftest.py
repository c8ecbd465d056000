from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_arraykit_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("ARRAYKIT_JSON_SORT_KEYS", "ARRAYKIT_JSON_ENSURE_ASCII", "ARRAYKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of the settings.
    monkeypatch.chdir(tmp_path)
