"""Runtime settings for the Bible API and CLI."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = ROOT / "config" / "api.yml"
DEFAULT_BIBLES_DIR = ROOT / "bibles"
DEFAULT_DATA_DIR = ROOT / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration shared by the API and the CLI."""

    bibles_dir: Path = DEFAULT_BIBLES_DIR
    data_dir: Path = DEFAULT_DATA_DIR
    cache_documents: bool = True
    search_ignore_case: bool = False
    enable_cors: bool = True


def _env(name: str) -> str:
    value = os.getenv(name)
    return value.strip() if isinstance(value, str) else ""


def _as_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower() if raw is not None else ""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return default


def _as_path(raw: Any, default: Path) -> Path:
    if raw is None or str(raw).strip() == "":
        return default
    path = Path(str(raw)).expanduser()
    if not path.is_absolute():
        path = ROOT / path
    return path


def load_config_file(path: Path | str | None = None) -> Dict[str, Any]:
    """Load the optional YAML settings file; a missing file yields ``{}``."""

    p = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at root of {p}, got {type(data)!r}")
    return data


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> Settings:
    """Build settings from defaults, the YAML file, then environment variables."""

    config_path = _env("BIBLE_API_CONFIG") or None
    raw = load_config_file(config_path)
    if overrides:
        raw = {**raw, **overrides}

    search = raw.get("search") or {}
    if not isinstance(search, Mapping):
        raise ValueError("search block must be a mapping")

    bibles_dir = _as_path(_env("BIBLE_API_BIBLES_DIR") or raw.get("bibles_dir"), DEFAULT_BIBLES_DIR)
    data_dir = _as_path(_env("BIBLE_API_DATA_DIR") or raw.get("data_dir"), DEFAULT_DATA_DIR)

    cache_documents = _as_bool(raw.get("cache_documents"), True)
    cache_documents = _as_bool(_env("BIBLE_API_CACHE") or None, cache_documents)

    ignore_case = _as_bool(search.get("ignore_case"), False)
    ignore_case = _as_bool(_env("BIBLE_API_SEARCH_IGNORE_CASE") or None, ignore_case)

    enable_cors = _as_bool(raw.get("enable_cors"), True)
    enable_cors = _as_bool(_env("BIBLE_API_ENABLE_CORS") or None, enable_cors)

    return Settings(
        bibles_dir=bibles_dir,
        data_dir=data_dir,
        cache_documents=cache_documents,
        search_ignore_case=ignore_case,
        enable_cors=enable_cors,
    )


__all__ = ["Settings", "load_config_file", "load_settings"]
