"""Bible API FastAPI application."""
from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bible_sdk import __version__
from bible_sdk.errors import BibleError

from .routers import bible, catalog, health, status
from .store import get_catalog, get_registry, get_settings
from .utils import err, status_for

structlog.configure(processors=[structlog.processors.JSONRenderer()])
logger = structlog.get_logger(__name__)


def _log_settings() -> None:
    settings = get_settings()
    logger.info(
        "api.settings.loaded",
        bibles_dir=str(settings.bibles_dir),
        data_dir=str(settings.data_dir),
        cache_documents=settings.cache_documents,
        search_ignore_case=settings.search_ignore_case,
        enable_cors=settings.enable_cors,
    )


def _log_catalog() -> None:
    catalog_ = get_catalog()
    registry = get_registry()
    missing = [item.id for item in catalog_.translations if str(item.id) not in registry]
    logger.info(
        "catalog.snapshot",
        translations=len(catalog_.translations),
        languages=len(catalog_.languages),
        documents=len(registry),
        translations_without_file=missing,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - framework glue
    _log_settings()
    _log_catalog()
    yield


app = FastAPI(
    title="Bible API",
    version=__version__,
    description="API for accessing Bible translations, books, chapters and verses.",
    docs_url="/api-docs",
    lifespan=lifespan,
)
app.include_router(health.router)
app.include_router(status.router)
app.include_router(catalog.router)
app.include_router(bible.router)


@app.exception_handler(BibleError)
async def bible_error_handler(request: Request, exc: BibleError) -> JSONResponse:
    code = status_for(exc)
    logger.info(
        "api.error",
        path=request.url.path,
        status=code,
        kind=type(exc).__name__,
        message=exc.message,
        detail=exc.detail,
    )
    error = exc.detail if code >= 500 else None
    return JSONResponse(status_code=code, content=err(exc.message, error))


if get_settings().enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
