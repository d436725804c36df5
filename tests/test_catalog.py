from __future__ import annotations

import json
from pathlib import Path

import pytest

from bible_sdk.catalog import load_catalog
from bible_sdk.config import ROOT
from bible_sdk.errors import NotFoundError, ParseError, StorageError

FIXTURE_DATA = Path(__file__).resolve().parent / "fixtures" / "data"


def test_load_fixture_catalog() -> None:
    catalog = load_catalog(FIXTURE_DATA)
    assert [item.id for item in catalog.translations] == [1, 2, 7]
    assert catalog.language(1).name == "Georgian"
    assert [item.id for item in catalog.translations_for_language(2)] == [1, 7]


def test_catalog_lookup_misses() -> None:
    catalog = load_catalog(FIXTURE_DATA)
    with pytest.raises(NotFoundError):
        catalog.language(404)
    assert catalog.translations_for_language(404) == ()


def test_shipped_languages_catalog() -> None:
    catalog = load_catalog(ROOT / "data")
    assert len(catalog.languages) == 18
    assert catalog.language(2).model_dump(by_alias=True) == {"id": 2, "language": "English"}
    english = catalog.translations_for_language(2)
    assert english and all(item.language_id == 2 for item in english)


def test_catalog_is_immutable() -> None:
    catalog = load_catalog(FIXTURE_DATA)
    with pytest.raises(Exception):
        catalog.translations = ()  # type: ignore[misc]
    with pytest.raises(Exception):
        catalog.translations[0].name = "changed"  # type: ignore[misc]


def test_missing_catalog_is_storage_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError, match="versions.json"):
        load_catalog(tmp_path)


def test_malformed_catalog_entry(tmp_path: Path) -> None:
    (tmp_path / "versions.json").write_text(json.dumps([{"id": 1}]), encoding="utf-8")
    (tmp_path / "languages.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ParseError, match=r"versions.json\[0\]"):
        load_catalog(tmp_path)
