"""Static translation and language catalogs."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import structlog

from .errors import NotFoundError
from .loader import load_languages, load_translations
from .models import Language, Translation

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Read-only reference lists, built once at startup."""

    translations: Tuple[Translation, ...]
    languages: Tuple[Language, ...]

    def language(self, language_id: int) -> Language:
        for item in self.languages:
            if item.id == language_id:
                return item
        raise NotFoundError("Language not found", detail=f"id {language_id}")

    def translations_for_language(self, language_id: int) -> Tuple[Translation, ...]:
        return tuple(item for item in self.translations if item.language_id == language_id)


def load_catalog(data_dir: Path | str) -> Catalog:
    """Read ``versions.json`` and ``languages.json`` from ``data_dir``."""

    catalog = Catalog(
        translations=load_translations(data_dir),
        languages=load_languages(data_dir),
    )
    logger.info(
        "catalog.loaded",
        path=str(data_dir),
        translations=len(catalog.translations),
        languages=len(catalog.languages),
    )
    return catalog


__all__ = ["Catalog", "load_catalog"]
