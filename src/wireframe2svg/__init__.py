"""wireframe2svg: parse, check and render content-first text wireframes."""

from wireframe2svg.classifier import LineCategory, classify_line, classify_lines, highlight_html
from wireframe2svg.exceptions import (
    DocumentNotFoundError,
    ExportError,
    FetchError,
    PatternLibraryError,
    StorageError,
    Wireframe2svgError,
)
from wireframe2svg.export import derive_filename, format_llm_export, format_penpot_export
from wireframe2svg.parser import parse_wireframe
from wireframe2svg.renderer import WireframeSvgRenderer, render_svg
from wireframe2svg.schemas import Diagnostic, ParsedWireframe, RenderConfig
from wireframe2svg.validator import validate_wireframe

__all__ = [
    "Diagnostic",
    "DocumentNotFoundError",
    "ExportError",
    "FetchError",
    "LineCategory",
    "ParsedWireframe",
    "PatternLibraryError",
    "RenderConfig",
    "StorageError",
    "Wireframe2svgError",
    "WireframeSvgRenderer",
    "classify_line",
    "classify_lines",
    "derive_filename",
    "format_llm_export",
    "format_penpot_export",
    "highlight_html",
    "parse_wireframe",
    "render_svg",
    "validate_wireframe",
]
