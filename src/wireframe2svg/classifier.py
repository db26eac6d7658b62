"""Classify wireframe lines for editor syntax highlighting."""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

from wireframe2svg.grammar import METADATA_LINE_RE


class LineCategory(str, Enum):
    """Visual category of a source line."""

    METADATA = "metadata"
    STRUCTURE = "structure"
    LAYOUT = "layout"
    INTERACTION = "interaction"
    DEFAULT = "default"

    @property
    def css_class(self) -> str:
        return f"hl-{self.value}"


_STRUCTURE_RE: Final = re.compile(r"^(#{1,6}|\|\|)")
_LAYOUT_RE: Final = re.compile(r"(\[.*?\s+(Start|End)\]|\[2 Columns\]|\[Sidebar\]|\[Card/Block\]|---)")
_INTERACTION_RE: Final = re.compile(
    r"(\[\[.*\]\]|\[.*?\]|<.*?>|\w+:\s*\[|^\s+_+\s*$|^\s+_+\]|^\*\s)"
)

# Checked in order; the first matching pattern decides the category.
_RULES: Final[tuple[tuple[re.Pattern[str], LineCategory], ...]] = (
    (METADATA_LINE_RE, LineCategory.METADATA),
    (_STRUCTURE_RE, LineCategory.STRUCTURE),
    (_LAYOUT_RE, LineCategory.LAYOUT),
    (_INTERACTION_RE, LineCategory.INTERACTION),
)


def classify_line(line: str) -> LineCategory:
    """Return the highlight category of a single line."""
    for pattern, category in _RULES:
        if pattern.search(line):
            return category
    return LineCategory.DEFAULT


def classify_lines(text: str) -> list[tuple[LineCategory, str]]:
    """Classify every line of ``text``.

    Empty lines are returned as a single space so they keep their height
    in the highlight layer.
    """
    return [(classify_line(line), line or " ") for line in text.split("\n")]


def highlight_html(text: str) -> str:
    """Render the highlight layer as one ``<span>`` per line."""
    spans = [
        f'<span class="{category.css_class}">{_escape_html(display)}</span>'
        for category, display in classify_lines(text)
    ]
    return "\n".join(spans)


def _escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
