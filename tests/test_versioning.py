from __future__ import annotations

from pathlib import Path

from bible_sdk.versioning import data_versions


def test_digest_follows_file_changes(tmp_path: Path) -> None:
    path = tmp_path / "1.json"
    path.write_text('{"books": [], "bible": []}', encoding="utf-8")
    first = data_versions({"1": path}, tmp_path)["bible:1"]
    assert data_versions({"1": path}, tmp_path)["bible:1"] == first

    path.write_text('{"books": [], "bible": [], "translation": "x"}', encoding="utf-8")
    second = data_versions({"1": path}, tmp_path)["bible:1"]
    assert second["sha256"] != first["sha256"]
    assert second["bytes"] == path.stat().st_size


def test_missing_catalogs_are_reported(tmp_path: Path) -> None:
    versions = data_versions({}, tmp_path)
    assert versions["translations"]["missing"] is True
    assert versions["languages"]["missing"] is True
