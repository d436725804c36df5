"""Process-wide settings, registry and catalog for API handlers."""
from __future__ import annotations

from functools import lru_cache

from bible_sdk.catalog import Catalog, load_catalog
from bible_sdk.config import Settings, load_settings
from bible_sdk.registry import BibleRegistry


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def get_registry() -> BibleRegistry:
    settings = get_settings()
    return BibleRegistry(settings.bibles_dir, cache=settings.cache_documents)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_catalog(get_settings().data_dir)


def reset_state() -> None:
    """Forget cached singletons so the next request re-reads configuration."""

    get_catalog.cache_clear()
    get_registry.cache_clear()
    get_settings.cache_clear()
