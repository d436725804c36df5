"""Utilities for reporting the data files a deployment serves."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

from .loader import LANGUAGES_NAME, TRANSLATIONS_NAME, file_sha256


@lru_cache(maxsize=256)
def _sha_for(path: str, mtime_ns: int, size: int) -> str:
    # mtime and size are part of the key so an edited file is hashed again.
    return file_sha256(Path(path))[:12]


def _describe(path: Path) -> dict[str, object]:
    if not path.exists():
        return {"missing": True, "path": str(path)}
    stat = path.stat()
    return {
        "sha256": _sha_for(str(path), stat.st_mtime_ns, stat.st_size),
        "bytes": stat.st_size,
        "path": str(path),
    }


def data_versions(bibles: Dict[str, Path], data_dir: Path) -> dict[str, dict[str, object]]:
    """Return digest metadata for catalogs and every registered document."""

    out: dict[str, dict[str, object]] = {
        "translations": _describe(data_dir / TRANSLATIONS_NAME),
        "languages": _describe(data_dir / LANGUAGES_NAME),
    }
    for bible_id, path in bibles.items():
        out[f"bible:{bible_id}"] = _describe(path)
    return out
