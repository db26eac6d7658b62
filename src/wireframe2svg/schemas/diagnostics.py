"""Validator output model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class DiagnosticCode(str, Enum):
    """Identifiers for the accessibility checks."""

    FIRST_HEADING_NOT_H1 = "FIRST_HEADING_NOT_H1"
    MULTIPLE_H1 = "MULTIPLE_H1"
    HEADING_LEVEL_SKIP = "HEADING_LEVEL_SKIP"
    MULTIPLE_METADATA_BLOCKS = "MULTIPLE_METADATA_BLOCKS"
    DUPLICATE_LINK = "DUPLICATE_LINK"


class Diagnostic(BaseModel):
    """An advisory accessibility finding.

    Attributes:
        code: Which check produced the finding.
        message: Human-readable description shown to authors.
        lines: 1-based source line numbers the finding refers to.
    """

    code: DiagnosticCode
    message: str
    lines: list[int] = Field(default_factory=list)
