"""Status endpoint exposing runtime metadata."""
from __future__ import annotations

import platform
import sys
import time

from fastapi import APIRouter

from bible_api.store import get_registry, get_settings
from bible_sdk import __version__ as sdk_version
from bible_sdk.versioning import data_versions

_started = time.time()
router = APIRouter()


@router.get("/status")
def status() -> dict[str, object]:
    """Return process health and data file metadata."""

    settings = get_settings()
    registry = get_registry()
    uptime = round(time.time() - _started, 2)
    return {
        "ok": True,
        "data": {
            "sdk_version": sdk_version,
            "bibles": registry.ids(),
            "data_versions": data_versions(registry.paths(), settings.data_dir),
            "settings": {
                "cache_documents": settings.cache_documents,
                "search_ignore_case": settings.search_ignore_case,
                "enable_cors": settings.enable_cors,
            },
            "uptime_sec": uptime,
            "build": {
                "python": sys.version.split()[0],
                "platform": platform.platform(),
                "fastapi": "installed",
            },
        },
        "warnings": [],
        "errors": [],
    }
