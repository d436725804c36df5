from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

FIXTURES = REPO_ROOT / "tests" / "fixtures"
FIXTURE_BIBLES = FIXTURES / "bibles"
FIXTURE_DATA = FIXTURES / "data"

from bible_sdk.loader import load_bible  # noqa: E402
from bible_sdk.models import Bible  # noqa: E402
from bible_sdk.registry import BibleRegistry  # noqa: E402


@pytest.fixture
def kjv() -> Bible:
    """Four books: Genesis (5+3 verses), Exodus (2), Romans (3) and an empty Obadiah."""

    return load_bible(FIXTURE_BIBLES / "1.json")


@pytest.fixture
def registry() -> BibleRegistry:
    return BibleRegistry(FIXTURE_BIBLES)


@pytest.fixture
def fixture_env(monkeypatch) -> Iterator[None]:  # noqa: ANN001 - pytest fixture
    """Point settings at the fixture files and drop cached singletons."""

    from bible_api.store import reset_state

    monkeypatch.delenv("BIBLE_API_CONFIG", raising=False)
    monkeypatch.delenv("BIBLE_API_SEARCH_IGNORE_CASE", raising=False)
    monkeypatch.setenv("BIBLE_API_BIBLES_DIR", str(FIXTURE_BIBLES))
    monkeypatch.setenv("BIBLE_API_DATA_DIR", str(FIXTURE_DATA))
    reset_state()
    try:
        yield
    finally:
        reset_state()


@pytest.fixture
def client(fixture_env):  # noqa: ANN001 - pytest fixture
    from fastapi.testclient import TestClient

    from bible_api.main import app

    return TestClient(app)
