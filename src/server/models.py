"""Pydantic models for the wireframe API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from server.server_config import MAX_DOCUMENT_CHARS
from wireframe2svg.classifier import LineCategory
from wireframe2svg.schemas import Diagnostic, PatternLibrary, RenderConfig, StoredDocument


class WireframeRequest(BaseModel):
    """Request body carrying wireframe text.

    Attributes
    ----------
    text : str
        The wireframe DSL source. May be empty.

    """

    text: str = Field(default="", max_length=MAX_DOCUMENT_CHARS, description="Wireframe DSL text")


class RenderRequest(WireframeRequest):
    """Request body for ``/api/render``.

    Attributes
    ----------
    config : RenderConfig | None
        Layout overrides. Defaults apply to anything left out.

    """

    config: RenderConfig | None = Field(default=None, description="Render configuration overrides")


class ExportTarget(str, Enum):
    """Prompt templates available for export."""

    LLM = "llm"
    PENPOT = "penpot"


class ValidateResponse(BaseModel):
    diagnostics: list[Diagnostic]


class HighlightLine(BaseModel):
    category: LineCategory
    text: str


class HighlightResponse(BaseModel):
    """Per-line highlight categories and the ready-made highlight layer markup."""

    lines: list[HighlightLine]
    html: str


class DocumentSaveRequest(BaseModel):
    """Request body for saving a document.

    Attributes
    ----------
    content : str
        Document text, stored as-is.
    name : str | None
        Display name. Keeps the stored name when omitted.

    """

    content: str = Field(..., max_length=MAX_DOCUMENT_CHARS)
    name: str | None = Field(default=None, description="Display name for the document")


class DocumentImportRequest(BaseModel):
    content: str = Field(..., max_length=MAX_DOCUMENT_CHARS)
    filename: str = Field(..., min_length=1, description="Name of the uploaded file")


class DocumentListResponse(BaseModel):
    current_id: str
    documents: list[StoredDocument]


class PatternsResponse(BaseModel):
    """Pattern library plus a load error when the fallback empty library is returned."""

    library: PatternLibrary
    error: str | None = None


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
