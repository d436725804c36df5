"""Structural checks for Bible documents."""
from __future__ import annotations

from typing import List

from .models import Bible, Book, Chapter


def _validate_summary(doc: Bible, errors: List[str]) -> None:
    if len(doc.books) != len(doc.bible):
        errors.append(
            f"books summary lists {len(doc.books)} entries but bible holds {len(doc.bible)} books"
        )
    for position, summary in enumerate(doc.books, start=1):
        if str(summary.index).strip() != str(position):
            errors.append(f"books[{position}] has index {summary.index}, expected {position}")
        if not summary.name.strip():
            errors.append(f"books[{position}] name must be non-empty")


def _validate_chapter(book_no: int, chapter_no: int, chapter: Chapter, errors: List[str]) -> None:
    where = f"book {book_no} chapter {chapter_no}"
    if str(chapter.chapter).strip() != str(chapter_no):
        errors.append(f"{where} is labelled {chapter.chapter!r}")
    for verse_no, verse in enumerate(chapter.verses, start=1):
        if str(verse.verse).strip() != str(verse_no):
            errors.append(f"{where} verse {verse_no} is labelled {verse.verse!r}")
        if not verse.text.strip():
            errors.append(f"{where} verse {verse_no} has empty text")


def _validate_book(book_no: int, book: Book, errors: List[str]) -> None:
    if not book.name.strip():
        errors.append(f"book {book_no} name must be non-empty")
    for chapter_no, chapter in enumerate(book.chapters, start=1):
        _validate_chapter(book_no, chapter_no, chapter, errors)


def validate_bible(doc: Bible) -> List[str]:
    """Return a list of problems; an empty list means the document is sound.

    Lookups address content by position, so labels that disagree with
    positions (a chapter "3" stored second) make URLs and payloads diverge.
    """

    errors: List[str] = []
    _validate_summary(doc, errors)
    for book_no, book in enumerate(doc.bible, start=1):
        _validate_book(book_no, book, errors)
    return errors


__all__ = ["validate_bible"]
