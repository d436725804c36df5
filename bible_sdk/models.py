"""Pydantic models for Bible documents and catalogs."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Numeric labels stay numbers and string labels stay strings, as stored.
Label = Union[str, int]


class Verse(BaseModel):
    """Smallest addressable unit of text.

    Labels keep the type the source file uses, and keys this model does
    not name are carried through to the serialized record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: Label
    text: str = Field(alias="bv")
    book: Label
    chapter: Label
    verse: Label


class Chapter(BaseModel):
    """A chapter label and its ordered verses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    chapter: Label
    verses: Tuple[Verse, ...] = ()


class Book(BaseModel):
    """A book and its ordered chapters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str = Field(alias="bookname")
    chapters: Tuple[Chapter, ...] = ()


class BookSummary(BaseModel):
    """Ordinal and display name of a book."""

    model_config = ConfigDict(frozen=True, extra="allow")

    index: Label
    name: str


class Bible(BaseModel):
    """One complete translation.

    ``books`` is the summary list served to clients; ``bible`` holds the
    content and is the source of truth for lookups.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    books: Tuple[BookSummary, ...] = ()
    bible: Tuple[Book, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Translation(BaseModel):
    """Catalog entry for an available translation."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    name: str
    language: str
    language_id: int


class Language(BaseModel):
    """Catalog entry for a language."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: int
    name: str = Field(alias="language")


def dump_verses(verses: List[Verse] | Tuple[Verse, ...]) -> List[Dict[str, Any]]:
    """Serialize verses with their wire field names."""

    return [verse.model_dump(by_alias=True) for verse in verses]


__all__ = [
    "Bible",
    "Book",
    "BookSummary",
    "Chapter",
    "Language",
    "Translation",
    "Verse",
    "dump_verses",
]
