"""Shared FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from wireframe2svg.storage import DocumentStore


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    """Return the process-wide document store (overridden in tests)."""
    return DocumentStore()
