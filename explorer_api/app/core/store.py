"""
JSON document store.

All content lives in a single JSON document.  This module provides the
``DocumentStore`` interface with two implementations, a file-backed
store used by the running service and an in-memory store used by
tests, plus the FastAPI dependency ``get_store`` that hands a store to
route handlers.

Every ``load`` re-reads the backing medium and every ``save`` rewrites
it completely.  There is no locking: two requests doing
read‑modify‑write at the same time can interleave and the last write
wins.  The store offers no concurrent-write isolation guarantee.
"""

import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from .config import settings
from .errors import StorageError
from .seed import build_seed_document

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentStore(ABC):
    """Load and persist the whole content document."""

    @abstractmethod
    def load(self) -> Document:
        """Return the current document, seeding it if none exists."""
        raise NotImplementedError

    @abstractmethod
    def save(self, document: Document) -> None:
        """Persist ``document``, replacing any previous content."""
        raise NotImplementedError


class JSONFileStore(DocumentStore):
    """Document store backed by one UTF‑8 JSON file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def load(self) -> Document:
        if not self.path.exists():
            document = build_seed_document()
            self.save(document)
            logger.info("Seeded document store at %s", self.path)
            return document
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            # ValueError covers both invalid JSON and invalid UTF-8
            raise StorageError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(document, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return document

    def save(self, document: Document) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"cannot write {self.path}: {exc}") from exc


class InMemoryStore(DocumentStore):
    """Document store kept in process memory.

    Documents are deep-copied on the way in and out, so a caller that
    mutates a loaded document without saving it leaves the store
    untouched, as with the file store.
    """

    def __init__(self, document: Optional[Document] = None) -> None:
        self._document = copy.deepcopy(document) if document is not None else build_seed_document()
        self.saves = 0

    def load(self) -> Document:
        return copy.deepcopy(self._document)

    def save(self, document: Document) -> None:
        self._document = copy.deepcopy(document)
        self.saves += 1


def get_data_path() -> str:
    """Compute the path to the JSON data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent  # explorer_api/
    return str((base_dir / data_file).resolve())


def get_store() -> DocumentStore:
    """FastAPI dependency returning the configured document store."""
    return JSONFileStore(get_data_path())


def init_store(store: DocumentStore) -> None:
    """Load the document once so a missing file is seeded at startup."""
    document = store.load()
    logger.info(
        "Document store ready: %d articles, %d images, %d sources",
        len(document.get("news", [])),
        len(document.get("images", [])),
        len(document.get("sources", [])),
    )
