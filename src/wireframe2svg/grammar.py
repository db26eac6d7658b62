"""Shared vocabulary of the wireframe DSL.

The classifier, parser, validator and renderer all read the same tokens;
the tables and patterns live here so their precedence stays in one place.
"""

from __future__ import annotations

import re
from typing import Final

# Recognised metadata prefixes mapped to the canonical key stored by the parser.
METADATA_KEYS: Final[dict[str, str]] = {
    "Title": "Title",
    "URL": "URL",
    "Page language": "Page language",
    "Page Purpose": "Page Purpose",
    "Page purpose": "Page Purpose",
    "Purpose": "Page Purpose",
    "Referrer": "Referrer",
    "Regions": "Regions",
    "Interactive Elements": "Interactive Elements",
}

# Raw-line metadata detection used for highlighting and block counting.
# Bare ``Purpose:`` is only understood by the parser.
METADATA_LINE_RE: Final = re.compile(
    r"^(Title|URL|Page language|Page Purpose|Page purpose|Referrer|Regions|Interactive Elements):"
)

LANDMARK_PREFIX: Final = "|| "
SKIP_LINK_MARKER: Final = "skip to main"

HEADING_RE: Final = re.compile(r"^(#{1,6})\s+(.+)")
# Headings as the validator sees them: unstripped line, single space after the hashes.
RAW_HEADING_RE: Final = re.compile(r"^(#{1,6}) ")
BUTTON_RE: Final = re.compile(r"\[\[(.+?)\]\]")
IMAGE_RE: Final = re.compile(r"<(.+?)>")
INPUT_RE: Final = re.compile(r"^([^:]+):\s*\[(_+)\]")
LINK_RE: Final = re.compile(r"\[([^\]]+)\](?:\(([^)]+)\))?")
DIVIDER_LINES: Final[frozenset[str]] = frozenset({"---", "***"})
LIST_PREFIXES: Final[tuple[str, ...]] = ("* ", "- ")

_WHITESPACE_RE: Final = re.compile(r"\s+")
_PLACEHOLDER_RE: Final = re.compile(r"^_+$")


def match_metadata(line: str) -> tuple[str, str] | None:
    """Return ``(canonical_key, value)`` when ``line`` starts with a metadata prefix."""
    prefix, sep, value = line.partition(":")
    if not sep:
        return None
    key = METADATA_KEYS.get(prefix)
    if key is None:
        return None
    return key, value.strip()


def is_placeholder_blank(text: str) -> bool:
    """True for form-field blanks such as ``____`` or ``__ __``."""
    return bool(_PLACEHOLDER_RE.match(_WHITESPACE_RE.sub("", text)))
