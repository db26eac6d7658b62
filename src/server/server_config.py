"""Server configuration."""

from __future__ import annotations

APP_TITLE = "wireframe2svg"
APP_DESCRIPTION = "Parse, check, render and export content-first text wireframes."

# Largest wireframe accepted by the API, in characters.
MAX_DOCUMENT_CHARS = 1_000_000
