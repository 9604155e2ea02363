from __future__ import annotations

from typing import Iterator

import pytest

from edit_engine.runtime import reload_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("EDIT_ENGINE_VALIDATE_EDITS", raising=False)
    reload_settings()
    yield
    reload_settings()
