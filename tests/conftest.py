from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests._fixtures.archives import FakeUrlopen


@pytest.fixture
def fake_urlopen(monkeypatch) -> Callable[[bytes], FakeUrlopen]:
    """Patch the fetcher's ``urlopen`` with a recorder serving the given bytes."""

    def install(payload: bytes) -> FakeUrlopen:
        fake = FakeUrlopen(payload)
        monkeypatch.setattr("fixturegen.fetch.urlopen", fake)
        return fake

    return install


@pytest.fixture
def download_dir(tmp_path: Path) -> Path:
    """Provide an empty download directory below the pytest tmp_path."""
    path = tmp_path / "generated"
    path.mkdir()
    return path
