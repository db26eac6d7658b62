"""Pattern library models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Pattern(BaseModel):
    """An insertable DSL snippet."""

    id: str
    label: str
    description: str = ""
    syntax: str


class PatternCategory(BaseModel):
    """A named group of patterns."""

    name: str
    patterns: list[Pattern] = Field(default_factory=list)


class ExampleDocument(BaseModel):
    """A bundled example wireframe."""

    name: str
    file: str


class PatternLibrary(BaseModel):
    """Categories of snippets plus example documents."""

    categories: list[PatternCategory] = Field(default_factory=list)
    examples: list[ExampleDocument] = Field(default_factory=list)
