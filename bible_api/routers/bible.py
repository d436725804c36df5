"""Routes exposing translation content."""
from __future__ import annotations

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter

from bible_api.store import get_registry, get_settings
from bible_sdk.models import dump_verses
from bible_sdk.resolver import (
    get_book,
    get_books,
    get_chapter,
    get_verse,
    get_verse_range,
    list_chapter_numbers,
)
from bible_sdk.verses import random_verse, search_verses

router = APIRouter(prefix="/api/bible", tags=["Bible"])
logger = structlog.get_logger(__name__)

# Literal first segments are registered before the /{bible_id}/... routes.


@router.get("/complete/{bible_id}")
def complete_bible(bible_id: str) -> Dict[str, Any]:
    """Return the whole document."""

    return get_registry().load(bible_id).to_payload()


@router.get("/random/{bible_id}")
def random_bible_verse(bible_id: str) -> Dict[str, Any]:
    doc = get_registry().load(bible_id)
    return random_verse(doc).model_dump(by_alias=True)


@router.post("/search/{bible_id}/{query}")
def search_bible(bible_id: str, query: str) -> List[Dict[str, Any]]:
    """Return verses containing ``query``, in reading order."""

    doc = get_registry().load(bible_id)
    ignore_case = get_settings().search_ignore_case
    hits = search_verses(doc, query, ignore_case=ignore_case)
    logger.info(
        "bible.search.completed",
        bible_id=bible_id,
        query=query,
        ignore_case=ignore_case,
        matches=len(hits),
    )
    return dump_verses(hits)


@router.get("/{bible_id}/books")
def list_books(bible_id: str) -> List[Dict[str, Any]]:
    doc = get_registry().load(bible_id)
    return [summary.model_dump() for summary in get_books(doc)]


@router.get("/{bible_id}/book/{book}")
def read_book(bible_id: str, book: int) -> Dict[str, Any]:
    doc = get_registry().load(bible_id)
    return get_book(doc, book).model_dump(by_alias=True)


@router.get("/{bible_id}/{book}/allchapters")
def list_chapters(bible_id: str, book: int) -> List[int]:
    doc = get_registry().load(bible_id)
    return list_chapter_numbers(doc, book)


@router.get("/{bible_id}/{book}/{chapter}")
def read_chapter(bible_id: str, book: int, chapter: int) -> Dict[str, Any]:
    doc = get_registry().load(bible_id)
    return get_chapter(doc, book, chapter).model_dump(by_alias=True)


@router.get("/{bible_id}/{book}/{chapter}/{verse}")
def read_verse(bible_id: str, book: int, chapter: int, verse: int) -> Dict[str, Any]:
    doc = get_registry().load(bible_id)
    return get_verse(doc, book, chapter, verse).model_dump(by_alias=True)


@router.get("/{bible_id}/{book}/{chapter}/{first}/{last}")
def read_verse_range(
    bible_id: str, book: int, chapter: int, first: int, last: int
) -> List[Dict[str, Any]]:
    """Return verses ``first`` to ``last``; ``last`` past the chapter end is truncated."""

    doc = get_registry().load(bible_id)
    return dump_verses(get_verse_range(doc, book, chapter, first, last))
