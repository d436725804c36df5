"""Aggregate statistics for a Bible document."""
from __future__ import annotations

from typing import Any, Dict, List

from .models import Bible


def compute_bible_stats(doc: Bible) -> Dict[str, Any]:
    """Compute descriptive counts for a translation."""

    per_book: List[Dict[str, Any]] = []
    chapters = 0
    verses = 0
    longest: Dict[str, Any] | None = None

    for index, book in enumerate(doc.bible, start=1):
        book_verses = 0
        for chapter in book.chapters:
            book_verses += len(chapter.verses)
            if longest is None or len(chapter.verses) > longest["verses"]:
                longest = {"book": index, "chapter": chapter.chapter, "verses": len(chapter.verses)}
        chapters += len(book.chapters)
        verses += book_verses
        per_book.append(
            {
                "index": index,
                "name": book.name,
                "chapters": len(book.chapters),
                "verses": book_verses,
            }
        )

    return {
        "books": len(doc.bible),
        "chapters": chapters,
        "verses": verses,
        "avg_verses_per_chapter": verses / chapters if chapters else 0.0,
        "longest_chapter": longest,
        "by_book": per_book,
    }
