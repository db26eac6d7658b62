"""Shared schemas for wireframe2svg."""

from wireframe2svg.schemas.diagnostics import Diagnostic, DiagnosticCode
from wireframe2svg.schemas.documents import ExportResult, SavedFile, StoredDocument
from wireframe2svg.schemas.elements import (
    ButtonElement,
    DividerElement,
    Element,
    HeadingElement,
    ImageElement,
    InputElement,
    LandmarkElement,
    LeafElement,
    LinkElement,
    ListItemElement,
    ParsedWireframe,
    SkipLinkElement,
    TextElement,
)
from wireframe2svg.schemas.patterns import ExampleDocument, Pattern, PatternCategory, PatternLibrary
from wireframe2svg.schemas.render import RenderConfig

__all__ = [
    "ButtonElement",
    "Diagnostic",
    "DiagnosticCode",
    "DividerElement",
    "Element",
    "ExampleDocument",
    "ExportResult",
    "HeadingElement",
    "ImageElement",
    "InputElement",
    "LandmarkElement",
    "LeafElement",
    "LinkElement",
    "ListItemElement",
    "ParsedWireframe",
    "Pattern",
    "PatternCategory",
    "PatternLibrary",
    "RenderConfig",
    "SavedFile",
    "SkipLinkElement",
    "StoredDocument",
    "TextElement",
]
