"""Common API response helpers."""
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from bible_sdk.errors import (
    BibleError,
    EmptyBibleError,
    InvalidRangeError,
    NotFoundError,
    StorageError,
)

STATUS_BY_ERROR: Dict[Type[BibleError], int] = {
    NotFoundError: 404,
    EmptyBibleError: 404,
    InvalidRangeError: 400,
    StorageError: 500,
}


def status_for(exc: BibleError) -> int:
    """Return the HTTP status for an SDK error, walking its class hierarchy."""

    for klass in type(exc).__mro__:
        status = STATUS_BY_ERROR.get(klass)
        if status is not None:
            return status
    return 500


def err(message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """Return an error body with an optional underlying error string."""

    body: Dict[str, Any] = {"message": message}
    if error:
        body["error"] = error
    return body
