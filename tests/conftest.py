"""Test setup for wireframe2svg."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

EXAMPLES = SRC / "wireframe2svg" / "data" / "examples"


@pytest.fixture
def login_wireframe() -> str:
    """The bundled sign-in example."""
    return (EXAMPLES / "login.txt").read_text(encoding="utf-8")
