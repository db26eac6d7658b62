"""Load the snippet library that feeds the pattern picker."""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import ValidationError

from wireframe2svg.config import WIREFRAME2SVG_PATTERNS_SOURCE
from wireframe2svg.exceptions import FetchError, PatternLibraryError
from wireframe2svg.http_utils import fetch_with_retries
from wireframe2svg.schemas import Pattern, PatternLibrary
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)


async def load_pattern_library(source: str | Path | None = None) -> tuple[PatternLibrary, str | None]:
    """Load the pattern library from a file path or an http(s) URL.

    A missing or broken library is not fatal: an empty library is returned
    together with a message the caller can show to the user.

    Returns:
        Tuple of (library, error message or None).
    """
    location = str(source or WIREFRAME2SVG_PATTERNS_SOURCE)
    try:
        raw = await _read_source(location)
        library = parse_pattern_library(raw)
    except (FetchError, PatternLibraryError) as exc:
        logger.warning("Failed to load pattern library from %s: %s", location, exc)
        return PatternLibrary(), "Failed to load pattern library"

    logger.debug("Loaded %d pattern categories from %s", len(library.categories), location)
    return library, None


def parse_pattern_library(raw: str) -> PatternLibrary:
    """Validate JSON text as a pattern library.

    Raises:
        PatternLibraryError: If the JSON is malformed or has the wrong shape.
    """
    try:
        return PatternLibrary.model_validate_json(raw)
    except ValidationError as exc:
        raise PatternLibraryError(f"Invalid pattern library: {exc.error_count()} error(s)") from exc


async def _read_source(location: str) -> str:
    if location.startswith(("http://", "https://")):
        return await fetch_with_retries(location)
    try:
        return await asyncio.to_thread(Path(location).read_text, encoding="utf-8")
    except OSError as exc:
        raise PatternLibraryError(f"Cannot read {location}: {exc}") from exc


def find_pattern(library: PatternLibrary, pattern_id: str) -> Pattern | None:
    for category in library.categories:
        for pattern in category.patterns:
            if pattern.id == pattern_id:
                return pattern
    return None


def insert_pattern(text: str, start: int, end: int, syntax: str) -> tuple[str, int]:
    """Replace ``text[start:end]`` with ``syntax``.

    Returns:
        Tuple of (new text, cursor position just after the inserted snippet).
        An empty snippet leaves the text untouched with the cursor at ``end``.
    """
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    if not syntax:
        return text, end
    return text[:start] + syntax + text[end:], start + len(syntax)
