"""Helpers for loading Bible documents and catalogs from JSON."""
from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, List, Tuple

from pydantic import ValidationError

from .errors import NotFoundError, ParseError, StorageError
from .models import Bible, Language, Translation

TRANSLATIONS_NAME = "versions.json"
LANGUAGES_NAME = "languages.json"


def read_file(path: Path | str) -> bytes:
    """Read a file, translating OS failures to SDK errors."""

    p = Path(path)
    try:
        return p.read_bytes()
    except FileNotFoundError as exc:
        raise NotFoundError(f"File not found: {p.name}", detail=str(p)) from exc
    except OSError as exc:
        raise StorageError(f"Failed to read {p.name}", detail=str(exc)) from exc


def decode_json(raw: bytes, name: str) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(f"{name}: invalid JSON", detail=str(exc)) from exc


def load_json(path: Path | str) -> Any:
    """Read and decode a JSON file."""

    p = Path(path)
    return decode_json(read_file(p), p.name)


def parse_bible(raw: bytes, name: str) -> Bible:
    """Parse the bytes of one translation document."""

    data = decode_json(raw, name)
    if not isinstance(data, dict):
        raise ParseError(f"{name}: expected an object at the root, got {type(data).__name__}")
    try:
        return Bible.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"{name}: document does not match the Bible schema", detail=str(exc)) from exc


def load_bible(path: Path | str) -> Bible:
    """Load one translation document."""

    p = Path(path)
    return parse_bible(read_file(p), p.name)


def _load_records(path: Path, model: type) -> Tuple[Any, ...]:
    try:
        data = load_json(path)
    except NotFoundError as exc:
        raise StorageError(f"Catalog file missing: {path.name}", detail=str(path)) from exc
    if not isinstance(data, list):
        raise ParseError(f"{path.name}: expected a list at the root, got {type(data).__name__}")
    records: List[Any] = []
    for position, item in enumerate(data):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            raise ParseError(f"{path.name}[{position}]: invalid entry", detail=str(exc)) from exc
    return tuple(records)


def load_translations(data_dir: Path | str) -> Tuple[Translation, ...]:
    """Load the translations catalog from ``versions.json``."""

    return _load_records(Path(data_dir) / TRANSLATIONS_NAME, Translation)


def load_languages(data_dir: Path | str) -> Tuple[Language, ...]:
    """Load the languages catalog from ``languages.json``."""

    return _load_records(Path(data_dir) / LANGUAGES_NAME, Language)


def file_sha256(path: Path) -> str:
    """Compute a SHA-256 digest for the supplied file path."""

    data = path.read_bytes()
    return hashlib.sha256(data).hexdigest()
