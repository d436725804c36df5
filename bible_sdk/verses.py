"""Flattened views over every verse of a Bible."""
from __future__ import annotations

import random
from typing import Iterator, List, Optional

from .errors import EmptyBibleError
from .models import Bible, Verse


def iter_verses(doc: Bible) -> Iterator[Verse]:
    """Yield verses in book, then chapter, then verse order."""

    for book in doc.bible:
        for chapter in book.chapters:
            yield from chapter.verses


def flatten_verses(doc: Bible) -> List[Verse]:
    return list(iter_verses(doc))


def count_verses(doc: Bible) -> int:
    return sum(len(chapter.verses) for book in doc.bible for chapter in book.chapters)


def search_verses(doc: Bible, query: str, *, ignore_case: bool = False) -> List[Verse]:
    """Return the verses whose text contains ``query``.

    By default the query is lowercased and matched against the verse text
    exactly as stored, so "Love" at the start of a sentence is missed. This
    mirrors the public API's historical behaviour. ``ignore_case=True``
    casefolds both sides instead.
    """

    if ignore_case:
        needle = query.casefold()
        return [verse for verse in iter_verses(doc) if needle in verse.text.casefold()]
    needle = query.lower()
    return [verse for verse in iter_verses(doc) if needle in verse.text]


def random_verse(doc: Bible, rng: Optional[random.Random] = None) -> Verse:
    """Pick one verse uniformly at random."""

    verses = flatten_verses(doc)
    if not verses:
        raise EmptyBibleError("Bible has no verses")
    draw = rng if rng is not None else random
    return verses[draw.randrange(len(verses))]


__all__ = ["count_verses", "flatten_verses", "iter_verses", "random_verse", "search_verses"]
