"""Stored document and export models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StoredDocument(BaseModel):
    """A wireframe kept in the document store."""

    doc_id: str
    name: str
    content: str
    timestamp: float = Field(..., description="Seconds since the epoch of the last save")


class SavedFile(BaseModel):
    """Content prepared for a file download."""

    filename: str
    content: str
    mime_type: str = "text/plain"


class ExportResult(BaseModel):
    """Wireframe text wrapped in an instructional prompt."""

    target: Literal["llm", "penpot"]
    content: str
    token_estimate: str | None = None
