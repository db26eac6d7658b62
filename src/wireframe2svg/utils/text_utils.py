"""Small text helpers shared by exports and the document store."""

from __future__ import annotations

import re
from urllib.parse import quote

from wireframe2svg.grammar import match_metadata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lower-case ``text`` and collapse non-alphanumeric runs into single hyphens."""
    return _NON_ALNUM_RE.sub("-", text.strip().lower()).strip("-")


def extract_title(text: str) -> str | None:
    """Return the first non-empty ``Title:`` value found at the start of a line."""
    for line in text.split("\n"):
        metadata = match_metadata(line)
        if metadata and metadata[0] == "Title" and metadata[1]:
            return metadata[1]
    return None


def safe_file_stem(doc_id: str) -> str:
    """Map a document identifier onto a file-system safe name.

    Percent-encoding keeps the mapping one-to-one, so distinct ids never
    share a file.
    """
    return quote(doc_id, safe="") or "%"
