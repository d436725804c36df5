"""Resolve 1-based book/chapter/verse ordinals inside a loaded Bible.

Callers address content with the ordinals they see in URLs (Genesis is
book 1). Storage is 0-based, and this module is the only place that
converts between the two. An ordinal is valid when ``1 <= n <= len(seq)``;
zero and negative values are rejected rather than wrapping around.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from .errors import InvalidRangeError, NotFoundError
from .models import Bible, Book, BookSummary, Chapter, Verse

T = TypeVar("T")

BOOK_NOT_FOUND = "Book not found"
CHAPTER_NOT_FOUND = "Chapter not found"
VERSE_NOT_FOUND = "Verse not found"
INVALID_RANGE = "Invalid verse range"


def _at(items: Sequence[T], ordinal: int, message: str) -> T:
    if ordinal < 1 or ordinal > len(items):
        raise NotFoundError(message, detail=f"ordinal {ordinal} outside 1..{len(items)}")
    return items[ordinal - 1]


def get_books(doc: Bible) -> Tuple[BookSummary, ...]:
    """Return the document's book summary list as stored."""

    return doc.books


def get_book(doc: Bible, book: int) -> Book:
    return _at(doc.bible, book, BOOK_NOT_FOUND)


def list_chapter_numbers(doc: Bible, book: int) -> List[int]:
    """Return ``[1, ..., N]`` for a book with N chapters."""

    resolved = get_book(doc, book)
    return list(range(1, len(resolved.chapters) + 1))


def get_chapter(doc: Bible, book: int, chapter: int) -> Chapter:
    try:
        resolved = get_book(doc, book)
    except NotFoundError as exc:
        raise NotFoundError(CHAPTER_NOT_FOUND, detail=exc.detail) from exc
    return _at(resolved.chapters, chapter, CHAPTER_NOT_FOUND)


def get_verse(doc: Bible, book: int, chapter: int, verse: int) -> Verse:
    located = get_chapter(doc, book, chapter)
    return _at(located.verses, verse, VERSE_NOT_FOUND)


def get_verse_range(doc: Bible, book: int, chapter: int, first: int, last: int) -> List[Verse]:
    """Return verses ``first..last`` inclusive.

    A ``last`` past the end of the chapter is truncated to the chapter's
    final verse. A range that selects nothing (``first > last``, ``first``
    below 1 or past the end) raises :class:`InvalidRangeError`.
    """

    located = get_chapter(doc, book, chapter)
    if first < 1 or first > last:
        raise InvalidRangeError(INVALID_RANGE, detail=f"range {first}-{last}")
    verses = list(located.verses[first - 1 : last])
    if not verses:
        raise InvalidRangeError(
            INVALID_RANGE,
            detail=f"range {first}-{last} is empty in a chapter of {len(located.verses)} verses",
        )
    return verses


__all__ = [
    "get_book",
    "get_books",
    "get_chapter",
    "get_verse",
    "get_verse_range",
    "list_chapter_numbers",
]
