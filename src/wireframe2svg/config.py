"""Local configuration for wireframe2svg."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DATA_DIR = ".wireframe2svg_data"
DEFAULT_PATTERNS_SOURCE = str(Path(__file__).resolve().parent / "data" / "patterns.json")
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "wireframe2svg/0.1 (+https://github.com/mgifford/content-first-wireframe)"
DEFAULT_LOG_LEVEL = "INFO"

# Local-only directory for saved wireframe documents.
WIREFRAME2SVG_DATA_PATH = Path(os.getenv("WIREFRAME2SVG_DATA_PATH", DEFAULT_DATA_DIR)).expanduser().resolve()
WIREFRAME2SVG_PATTERNS_SOURCE = os.getenv("WIREFRAME2SVG_PATTERNS_SOURCE", DEFAULT_PATTERNS_SOURCE)
WIREFRAME2SVG_FETCH_TIMEOUT_S = float(os.getenv("WIREFRAME2SVG_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
WIREFRAME2SVG_FETCH_MAX_RETRIES = int(os.getenv("WIREFRAME2SVG_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
WIREFRAME2SVG_FETCH_BACKOFF_S = float(os.getenv("WIREFRAME2SVG_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
WIREFRAME2SVG_USER_AGENT = os.getenv("WIREFRAME2SVG_USER_AGENT", DEFAULT_USER_AGENT)
WIREFRAME2SVG_LOG_LEVEL = os.getenv("WIREFRAME2SVG_LOG_LEVEL", DEFAULT_LOG_LEVEL)
