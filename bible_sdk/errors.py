"""Exception taxonomy for Bible lookups."""
from __future__ import annotations


class BibleError(Exception):
    """Base class for every failure raised by the SDK."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(BibleError):
    """A document, book, chapter or verse ordinal does not resolve."""


class InvalidRangeError(BibleError):
    """A verse range resolved to zero verses inside an existing chapter."""


class StorageError(BibleError):
    """A backing file could not be read."""


class ParseError(StorageError):
    """A backing file was read but is not a valid document."""


class EmptyBibleError(BibleError):
    """A random draw was requested from a document without verses."""


__all__ = [
    "BibleError",
    "EmptyBibleError",
    "InvalidRangeError",
    "NotFoundError",
    "ParseError",
    "StorageError",
]
