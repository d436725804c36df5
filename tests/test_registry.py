from __future__ import annotations

import json
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from bible_sdk.errors import NotFoundError, ParseError, StorageError
from bible_sdk.loader import load_bible
from bible_sdk.registry import BibleRegistry
from bible_sdk.resolver import get_books, get_chapter, get_verse

FIXTURE_BIBLES = Path(__file__).resolve().parent / "fixtures" / "bibles"


def test_scan_lists_ids_in_natural_order(registry) -> None:  # noqa: ANN001 - fixture
    assert registry.ids() == ["1", "2", "broken", "single"]
    assert "1" in registry
    assert "3" not in registry
    assert len(registry) == 4


def test_load_caches_documents(registry) -> None:  # noqa: ANN001 - fixture
    first = registry.load("1")
    assert registry.get("1") is first
    registry.clear()
    assert registry.load("1") is not first


def test_load_without_cache_rereads(tmp_path: Path) -> None:
    shutil.copy(FIXTURE_BIBLES / "single.json", tmp_path / "5.json")
    registry = BibleRegistry(tmp_path, cache=False)
    first = registry.load("5")
    second = registry.load("5")
    assert first == second
    assert first is not second


def test_unknown_id_is_not_found(registry) -> None:  # noqa: ANN001 - fixture
    with pytest.raises(NotFoundError, match="Bible not found"):
        registry.load("99")


def test_ids_never_escape_the_directory(registry) -> None:  # noqa: ANN001 - fixture
    with pytest.raises(NotFoundError):
        registry.load("../fixtures/bibles/1")


def test_malformed_document_is_parse_error(registry) -> None:  # noqa: ANN001 - fixture
    with pytest.raises(ParseError, match="invalid JSON"):
        registry.load("broken")


def test_parse_error_is_storage_error(registry) -> None:  # noqa: ANN001 - fixture
    with pytest.raises(StorageError):
        registry.load("broken")


def test_schema_mismatch_is_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"books": [], "bible": [{"chapters": []}]}), encoding="utf-8")
    with pytest.raises(ParseError, match="does not match"):
        load_bible(path)


def test_non_object_root_is_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ParseError, match="expected an object"):
        load_bible(path)


def test_missing_file_is_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        load_bible(tmp_path / "absent.json")


def _source(name: str) -> dict:
    return json.loads((FIXTURE_BIBLES / name).read_text(encoding="utf-8"))


def test_verse_is_served_as_stored(registry) -> None:  # noqa: ANN001 - fixture
    source = _source("single.json")["bible"][0]["chapters"][0]["verses"][0]
    verse = get_verse(registry.load("single"), 1, 1, 1)
    assert verse.model_dump(by_alias=True) == source
    assert verse.id == 65001001
    assert (verse.book, verse.chapter, verse.verse) == (65, 1, 1)


def test_books_summary_is_verbatim(registry) -> None:  # noqa: ANN001 - fixture
    source = _source("single.json")["books"]
    books = get_books(registry.load("single"))
    assert [book.model_dump() for book in books] == source


def test_chapter_keeps_unknown_keys(registry) -> None:  # noqa: ANN001 - fixture
    source = _source("single.json")["bible"][0]["chapters"][0]
    chapter = get_chapter(registry.load("single"), 1, 1)
    assert chapter.model_dump(mode="json", by_alias=True) == source


@pytest.mark.parametrize("name", ["1.json", "2.json", "single.json"])
def test_complete_payload_matches_source(registry, name: str) -> None:  # noqa: ANN001 - fixture
    bible_id = name.removesuffix(".json")
    assert registry.load(bible_id).to_payload() == _source(name)


def test_uncached_load_reads_file_once(tmp_path: Path, monkeypatch) -> None:  # noqa: ANN001
    import bible_sdk.registry as registry_module

    shutil.copy(FIXTURE_BIBLES / "single.json", tmp_path / "5.json")
    reads: list[Path] = []
    original = registry_module.read_file

    def counting_read(path):  # noqa: ANN001, ANN202 - test double
        reads.append(Path(path))
        return original(path)

    monkeypatch.setattr(registry_module, "read_file", counting_read)
    registry = BibleRegistry(tmp_path, cache=False)
    registry.load("5")
    registry.load("5")
    assert reads == [tmp_path / "5.json", tmp_path / "5.json"]


def test_concurrent_first_loads_share_one_document(registry) -> None:  # noqa: ANN001 - fixture
    with ThreadPoolExecutor(max_workers=8) as pool:
        documents = list(pool.map(registry.load, ["1"] * 16))
    assert all(document is registry.load("1") for document in documents)


def test_rescan_picks_up_new_files(tmp_path: Path) -> None:
    registry = BibleRegistry(tmp_path)
    assert registry.ids() == []
    shutil.copy(FIXTURE_BIBLES / "single.json", tmp_path / "10.json")
    shutil.copy(FIXTURE_BIBLES / "single.json", tmp_path / "9.json")
    assert registry.scan() == ["9", "10"]
    assert registry.preload() == 2


def test_missing_directory_is_empty(tmp_path: Path) -> None:
    registry = BibleRegistry(tmp_path / "nowhere")
    assert registry.ids() == []
