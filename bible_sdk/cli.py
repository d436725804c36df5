"""Command line helpers for inspecting translation files."""
from __future__ import annotations

import json
import logging
import random
import sys
from typing import List, Optional

import structlog
import typer

from .catalog import load_catalog
from .config import load_settings
from .errors import BibleError
from .models import Bible, dump_verses
from .registry import BibleRegistry
from .resolver import get_chapter, get_verse, get_verse_range
from .stats import compute_bible_stats
from .validators import validate_bible
from .verses import random_verse, search_verses

app = typer.Typer(help="Bible data utilities")

logger = structlog.get_logger(__name__)


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit info logs on stderr"),
) -> None:
    """Inspect translation files and query them offline."""

    level = logging.INFO if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )


def _registry() -> BibleRegistry:
    settings = load_settings()
    return BibleRegistry(settings.bibles_dir, cache=False)


def _load(registry: BibleRegistry, bible_id: str) -> Bible:
    try:
        return registry.load(bible_id)
    except BibleError as exc:
        typer.echo(f"Failed to load bible {bible_id}: {exc.message}")
        if exc.detail:
            typer.echo(exc.detail)
        raise typer.Exit(code=1) from exc


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("list")
def list_bibles(
    language: Optional[int] = typer.Option(
        None, "--language", "-l", help="Only list translations in this language id"
    ),
) -> None:
    """List the documents on disk and the translations catalog."""

    settings = load_settings()
    registry = BibleRegistry(settings.bibles_dir, cache=False)
    typer.echo(f"bibles dir: {settings.bibles_dir}")
    typer.echo(f"documents: {len(registry)}")
    for bible_id in registry.ids():
        typer.echo(f"  {bible_id}")

    try:
        catalog = load_catalog(settings.data_dir)
    except BibleError as exc:
        typer.echo(f"catalog unavailable: {exc.message}")
        return

    translations = catalog.translations
    if language is not None:
        try:
            selected = catalog.language(language)
        except BibleError as exc:
            typer.echo(exc.message)
            raise typer.Exit(code=1) from exc
        translations = catalog.translations_for_language(language)
        typer.echo(f"language: {selected.name}")
    typer.echo(f"translations: {len(translations)}")
    for item in translations:
        marker = "" if str(item.id) in registry else " (no file)"
        typer.echo(f"  {item.id}: {item.name} [{item.language}]{marker}")


@app.command("validate")
def validate(
    bible_id: Optional[str] = typer.Argument(None, help="Document id; all when omitted"),
) -> None:
    """Check that labels agree with positions in one or every document."""

    registry = _registry()
    ids: List[str] = [bible_id] if bible_id else registry.ids()
    failed = 0

    for current in ids:
        doc = _load(registry, current)
        problems = validate_bible(doc)
        if problems:
            failed += 1
            typer.echo(f"{current}: {len(problems)} problem(s)")
            for problem in problems:
                typer.echo(f"- {problem}")
            logger.info("bible.validation.failed", bible_id=current, errors=len(problems))
        else:
            typer.echo(f"{current}: OK")

    if failed:
        raise typer.Exit(code=1)


@app.command("stats")
def stats(bible_id: str = typer.Argument(..., help="Document id")) -> None:
    """Print book, chapter and verse counts."""

    doc = _load(_registry(), bible_id)
    summary = compute_bible_stats(doc)
    typer.echo(f"books: {summary['books']}")
    typer.echo(f"chapters: {summary['chapters']}")
    typer.echo(f"verses: {summary['verses']}")
    typer.echo(f"avg verses per chapter: {summary['avg_verses_per_chapter']:.2f}")
    for book in summary["by_book"]:
        typer.echo(f"  {book['index']:>3} {book['name']}: {book['chapters']} ch, {book['verses']} v")


@app.command("verse")
def verse(
    bible_id: str = typer.Argument(..., help="Document id"),
    book: int = typer.Argument(..., help="Book number, starting at 1"),
    chapter: int = typer.Argument(..., help="Chapter number, starting at 1"),
    first: Optional[int] = typer.Argument(None, help="Verse number; whole chapter when omitted"),
    last: Optional[int] = typer.Option(None, "--last", help="Last verse of a range"),
) -> None:
    """Print a chapter, a verse or a verse range as JSON."""

    doc = _load(_registry(), bible_id)
    try:
        if first is None:
            payload: object = get_chapter(doc, book, chapter).model_dump(by_alias=True)
        elif last is None:
            payload = get_verse(doc, book, chapter, first).model_dump(by_alias=True)
        else:
            payload = dump_verses(get_verse_range(doc, book, chapter, first, last))
    except BibleError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc
    _echo_json(payload)


@app.command("search")
def search(
    bible_id: str = typer.Argument(..., help="Document id"),
    query: str = typer.Argument(..., help="Text to look for"),
    ignore_case: Optional[bool] = typer.Option(
        None, "--ignore-case/--match-case", help="Override the configured case policy"
    ),
) -> None:
    """Print every verse containing the query."""

    settings = load_settings()
    doc = _load(_registry(), bible_id)
    fold = settings.search_ignore_case if ignore_case is None else ignore_case
    hits = search_verses(doc, query, ignore_case=fold)
    for hit in hits:
        typer.echo(f"{hit.book}:{hit.chapter}:{hit.verse} {hit.text}")
    typer.echo(f"matches: {len(hits)}")


@app.command("random")
def random_command(
    bible_id: str = typer.Argument(..., help="Document id"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a repeatable draw"),
) -> None:
    """Print one verse chosen at random."""

    doc = _load(_registry(), bible_id)
    rng = random.Random(seed) if seed is not None else None
    try:
        picked = random_verse(doc, rng)
    except BibleError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc
    typer.echo(f"{picked.book}:{picked.chapter}:{picked.verse} {picked.text}")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
