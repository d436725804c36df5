"""Translation and language catalog endpoints."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter

from bible_api.store import get_catalog

router = APIRouter(prefix="/api")


@router.get("/bible/all", tags=["Bible"])
def list_translations() -> List[Dict[str, Any]]:
    """Return every available translation with its language."""

    return [item.model_dump() for item in get_catalog().translations]


@router.get("/languages", tags=["Languages"])
def list_languages() -> List[Dict[str, Any]]:
    return [item.model_dump(by_alias=True) for item in get_catalog().languages]
