"""Registry of translation documents found in the bibles directory."""
from __future__ import annotations

import hashlib
import threading
from pathlib import Path
from typing import Dict, List, Tuple

import structlog

from .errors import NotFoundError
from .loader import parse_bible, read_file
from .models import Bible
from .verses import count_verses

logger = structlog.get_logger(__name__)


def _id_sort_key(bible_id: str) -> Tuple[int, int, str]:
    if bible_id.isdigit():
        return (0, int(bible_id), bible_id)
    return (1, 0, bible_id)


class BibleRegistry:
    """Maps document ids to their JSON files and serves parsed documents.

    Ids come from ``<id>.json`` file names discovered by :meth:`scan`; a
    lookup never builds a path out of caller input. With ``cache`` enabled
    a document is parsed once and shared afterwards, otherwise every call
    re-reads the file.
    """

    def __init__(self, bibles_dir: Path | str, *, cache: bool = True) -> None:
        self.bibles_dir = Path(bibles_dir)
        self.cache = cache
        self._paths: Dict[str, Path] = {}
        self._documents: Dict[str, Bible] = {}
        self._lock = threading.Lock()
        self.scan()

    def scan(self) -> List[str]:
        """Discover the documents on disk and return their ids."""

        paths: Dict[str, Path] = {}
        if self.bibles_dir.is_dir():
            for path in self.bibles_dir.glob("*.json"):
                if path.is_file():
                    paths[path.stem] = path
        else:
            logger.warning("bible.registry.missing_dir", path=str(self.bibles_dir))

        with self._lock:
            self._paths = paths
            self._documents = {
                key: doc for key, doc in self._documents.items() if key in paths
            }

        ids = self.ids()
        logger.info("bible.registry.scanned", path=str(self.bibles_dir), documents=len(ids), ids=ids)
        return ids

    def ids(self) -> List[str]:
        return sorted(self._paths, key=_id_sort_key)

    def paths(self) -> Dict[str, Path]:
        return {bible_id: self._paths[bible_id] for bible_id in self.ids()}

    def __contains__(self, bible_id: object) -> bool:
        return isinstance(bible_id, str) and bible_id in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def path_for(self, bible_id: str) -> Path:
        """Return the backing file of a registered document."""

        try:
            return self._paths[bible_id]
        except KeyError:
            raise NotFoundError("Bible not found", detail=f"no document with id {bible_id!r}") from None

    def load(self, bible_id: str) -> Bible:
        """Return the parsed document for ``bible_id``."""

        path = self.path_for(bible_id)
        if not self.cache:
            return self._read(bible_id, path)

        document = self._documents.get(bible_id)
        if document is not None:
            return document
        # Parsed outside the lock; a concurrent first load of the same id
        # keeps whichever document was stored first.
        parsed = self._read(bible_id, path)
        with self._lock:
            return self._documents.setdefault(bible_id, parsed)

    get = load

    def preload(self) -> int:
        """Parse every registered document; return how many were loaded."""

        for bible_id in self.ids():
            self.load(bible_id)
        return len(self._documents)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()

    def _read(self, bible_id: str, path: Path) -> Bible:
        raw = read_file(path)
        document = parse_bible(raw, path.name)
        logger.info(
            "bible.document.loaded",
            bible_id=bible_id,
            path=str(path),
            books=len(document.bible),
            verses=count_verses(document),
            sha256=hashlib.sha256(raw).hexdigest()[:12],
        )
        return document


__all__ = ["BibleRegistry"]
