"""Public SDK surface for serving Bible text."""
from __future__ import annotations

from .catalog import Catalog, load_catalog
from .config import Settings, load_settings
from .errors import (
    BibleError,
    EmptyBibleError,
    InvalidRangeError,
    NotFoundError,
    ParseError,
    StorageError,
)
from .loader import file_sha256, load_bible, load_languages, load_translations
from .models import Bible, Book, BookSummary, Chapter, Language, Translation, Verse
from .registry import BibleRegistry
from .resolver import (
    get_book,
    get_books,
    get_chapter,
    get_verse,
    get_verse_range,
    list_chapter_numbers,
)
from .stats import compute_bible_stats
from .validators import validate_bible
from .verses import count_verses, flatten_verses, iter_verses, random_verse, search_verses

__all__ = [
    "__version__",
    "Bible",
    "BibleError",
    "BibleRegistry",
    "Book",
    "BookSummary",
    "Catalog",
    "Chapter",
    "EmptyBibleError",
    "InvalidRangeError",
    "Language",
    "NotFoundError",
    "ParseError",
    "Settings",
    "StorageError",
    "Translation",
    "Verse",
    "compute_bible_stats",
    "count_verses",
    "file_sha256",
    "flatten_verses",
    "get_book",
    "get_books",
    "get_chapter",
    "get_verse",
    "get_verse_range",
    "iter_verses",
    "list_chapter_numbers",
    "load_bible",
    "load_catalog",
    "load_languages",
    "load_settings",
    "load_translations",
    "random_verse",
    "search_verses",
    "validate_bible",
]

__version__ = "1.0.0"
