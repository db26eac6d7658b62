"""File-backed store for wireframe documents."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

from pydantic import ValidationError

from wireframe2svg.config import WIREFRAME2SVG_DATA_PATH
from wireframe2svg.exceptions import DocumentNotFoundError, StorageError
from wireframe2svg.export import document_id_for, document_name_for
from wireframe2svg.schemas import StoredDocument
from wireframe2svg.utils.logging_config import get_logger
from wireframe2svg.utils.text_utils import safe_file_stem

logger = get_logger(__name__)

CURRENT_DOC_ID = "current"
CURRENT_DOC_NAME = "Current Document"
UNTITLED_DOC_NAME = "Untitled"

_DOCUMENTS_DIR = "documents"
_CURRENT_POINTER = "current_doc"


class DocumentStore:
    """Keeps one JSON file per document plus a pointer to the current one.

    Content is treated as an opaque string. Every file-system failure is
    raised as ``StorageError`` so callers can report it without crashing.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self.base_path = base_path or WIREFRAME2SVG_DATA_PATH
        self.documents_path = self.base_path / _DOCUMENTS_DIR

    def _document_path(self, doc_id: str) -> Path:
        return self.documents_path / f"{safe_file_stem(doc_id)}.json"

    async def save(self, doc_id: str, content: str, name: str | None = None) -> StoredDocument:
        """Store ``content`` under ``doc_id``, keeping the previous name unless one is given."""
        if name is None:
            if doc_id == CURRENT_DOC_ID:
                name = CURRENT_DOC_NAME
            else:
                try:
                    name = (await self.get(doc_id)).name
                except DocumentNotFoundError:
                    name = UNTITLED_DOC_NAME

        document = StoredDocument(doc_id=doc_id, name=name, content=content, timestamp=time.time())
        await self._write(self._document_path(doc_id), document.model_dump_json(indent=2))
        logger.debug("Saved document %s (%d chars)", doc_id, len(content))
        return document

    async def get(self, doc_id: str) -> StoredDocument:
        """Return the stored document.

        Raises:
            DocumentNotFoundError: If nothing is stored under ``doc_id``.
            StorageError: If the file cannot be read or is corrupt.
        """
        path = self._document_path(doc_id)
        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(f"No document stored as {doc_id!r}") from exc
        except OSError as exc:
            raise StorageError(f"Could not read document {doc_id!r}: {exc}") from exc

        try:
            document = StoredDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise StorageError(f"Stored document {doc_id!r} is corrupt") from exc

        # Case-insensitive file systems can still fold two ids onto one file.
        if document.doc_id != doc_id:
            raise DocumentNotFoundError(f"No document stored as {doc_id!r}")
        return document

    async def load(self, doc_id: str) -> str:
        return (await self.get(doc_id)).content

    async def delete(self, doc_id: str) -> None:
        path = self._document_path(doc_id)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(f"No document stored as {doc_id!r}") from exc
        except OSError as exc:
            raise StorageError(f"Could not delete document {doc_id!r}: {exc}") from exc

    async def list_documents(self) -> list[StoredDocument]:
        """Return saved documents other than the scratch ``current`` one, sorted by id."""
        try:
            paths = await asyncio.to_thread(lambda: sorted(self.documents_path.glob("*.json")))
        except OSError as exc:
            raise StorageError(f"Could not list documents: {exc}") from exc

        documents: list[StoredDocument] = []
        for path in paths:
            try:
                raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
                document = StoredDocument.model_validate_json(raw)
            except (OSError, ValidationError) as exc:
                logger.warning("Skipping unreadable document file %s: %s", path, exc)
                continue
            if document.doc_id != CURRENT_DOC_ID:
                documents.append(document)
        return sorted(documents, key=lambda document: document.doc_id)

    async def get_current_id(self) -> str:
        pointer = self.base_path / _CURRENT_POINTER
        try:
            value = (await asyncio.to_thread(pointer.read_text, encoding="utf-8")).strip()
        except FileNotFoundError:
            return CURRENT_DOC_ID
        except OSError as exc:
            raise StorageError(f"Could not read current document pointer: {exc}") from exc
        return value or CURRENT_DOC_ID

    async def set_current_id(self, doc_id: str) -> None:
        await self._write(self.base_path / _CURRENT_POINTER, doc_id)

    async def import_text(self, content: str, filename: str) -> StoredDocument:
        """Store content loaded from a file and make it the current document."""
        name = document_name_for(content, filename)
        document = await self.save(document_id_for(name), content, name=name)
        await self.set_current_id(document.doc_id)
        logger.info("Imported %s as %s", filename, document.doc_id)
        return document

    async def _write(self, path: Path, content: str) -> None:
        try:
            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            await asyncio.to_thread(path.write_text, content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc
