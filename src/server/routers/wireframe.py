"""Wireframe engine endpoints: parse, validate, highlight, render and export."""

from fastapi import APIRouter
from fastapi.responses import Response

from server.models import (
    ExportTarget,
    HighlightLine,
    HighlightResponse,
    RenderRequest,
    ValidateResponse,
    WireframeRequest,
)
from wireframe2svg.classifier import classify_lines, highlight_html
from wireframe2svg.export import format_llm_export, format_penpot_export
from wireframe2svg.parser import parse_wireframe
from wireframe2svg.renderer import render_svg
from wireframe2svg.schemas import ExportResult, ParsedWireframe
from wireframe2svg.validator import validate_wireframe

router = APIRouter(prefix="/api")

SVG_MEDIA_TYPE = "image/svg+xml"


@router.post("/parse")
async def api_parse(request: WireframeRequest) -> ParsedWireframe:
    """Parse wireframe text into metadata and the element tree."""
    return parse_wireframe(request.text)


@router.post("/validate")
async def api_validate(request: WireframeRequest) -> ValidateResponse:
    """Run the accessibility checks. Findings are advisory and never an error status."""
    return ValidateResponse(diagnostics=validate_wireframe(request.text))


@router.post("/highlight")
async def api_highlight(request: WireframeRequest) -> HighlightResponse:
    lines = [HighlightLine(category=category, text=text) for category, text in classify_lines(request.text)]
    return HighlightResponse(lines=lines, html=highlight_html(request.text))


@router.post("/render", response_class=Response)
async def api_render(request: RenderRequest) -> Response:
    """Render wireframe text as an SVG document.

    **Returns**

    - **Response**: ``image/svg+xml`` body, a minimal empty canvas for empty text

    """
    return Response(content=render_svg(request.text, request.config), media_type=SVG_MEDIA_TYPE)


@router.post("/export/{target}")
async def api_export(target: ExportTarget, request: WireframeRequest) -> ExportResult:
    """Wrap the wireframe in the LLM context prompt or the Penpot conversion prompt."""
    if target is ExportTarget.PENPOT:
        return format_penpot_export(request.text)
    return format_llm_export(request.text)
