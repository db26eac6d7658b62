"""Wrap wireframe text for LLM conversion and prepare file downloads."""

from __future__ import annotations

from datetime import date
from pathlib import Path

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from wireframe2svg.exceptions import ExportError
from wireframe2svg.schemas import ExportResult, SavedFile
from wireframe2svg.utils.logging_config import get_logger
from wireframe2svg.utils.text_utils import extract_title, slugify

logger = get_logger(__name__)

SYSTEM_PROMPT = """Introduction
It is important to be able to allow content designers and service designers to quickly iterate and test design ideas with a broad range of users. In doing user testing and research, it is important to be able to engage a wide range of users, including those with a wide range of visual disabilities. Text is simply the most inclusive way to share ideas to the broadest possible audience.
Accessibility is often encouraged to Shift-Left, and make sure that people with disabilities are included in the design process. There are no visual wireframe tools available today which are built to support the inclusion of screen reader users. If screen reader users cannot participate in the design process, then they cannot be engaged in co-designing to meet their needs.
This allows for a content-first approach to design. Because people are used to collaborating in documents, it also allows more people to be involved.
Legend / Patterns
Default to Markdown to show structure
[](https://www.google.com/search?q=) Links - Undefined links identified with [] - only complete [example](link to /) if page is defined.
[[]] Buttons - describe action
<> Images
# Headings
|| Landmarks
* Bullets
[__] Forms and labels
"""

PENPOT_EXPORT_PROMPT = """You are an expert wireframe designer. Your team has generated a content-first, text-based wireframe that outlines the key elements of a page that they have been designing. I need you to take this and convert it into a visual .penpot file that can be seen visually to help us prepare for production.

Provide all of the assets that are needed for a complete and validated Penpot file. Ensure that it has all of the elements to make it visually representative and to carry forward the semantics expressed in the text wireframe.

**Important accessibility requirements:**
- It is critical that accessibility is preserved in the visual design
- The wireframe you create in Penpot must meet WCAG 2.2 AA standards
- Maintain semantic structure and landmark regions from the original wireframe
- Ensure proper heading hierarchy and contrast ratios

**Deliverables:**
- A complete .penpot file with all boards, components, and layers properly organized
- Clear naming for all objects and groups
- Consistent typography, spacing, and color system
- Reusable components for buttons, inputs, and cards
- All assets packaged and ready for import into Penpot

If you have any concerns or questions about accessibility or design choices, please let me know.

**After you've created the file:**
Please remind me how to import it into https://design.penpot.app and what to do if I don't already have an account.

---

## Wireframe to Convert:
"""

TEXT_MIME_TYPE = "text/plain"


def format_llm_export(text: str) -> ExportResult:
    """Prefix the wireframe with the DSL legend for pasting into an LLM."""
    content = SYSTEM_PROMPT + "\n\n" + text
    return ExportResult(target="llm", content=content, token_estimate=_format_token_count(content))


def format_penpot_export(text: str) -> ExportResult:
    """Prefix the wireframe with instructions for generating a Penpot file."""
    content = PENPOT_EXPORT_PROMPT + "\n\n" + text
    return ExportResult(target="penpot", content=content, token_estimate=_format_token_count(content))


def derive_filename(text: str, today: date | None = None) -> str:
    """Name a saved wireframe after its title, or after the date when untitled.

    ``Title: My Great Page!!`` gives ``my-great-page.txt``; text without a
    usable title gives ``wireframe-YYYY-MM-DD.txt``.
    """
    title = extract_title(text)
    stem = slugify(title) if title else ""
    if stem:
        return f"{stem}.txt"
    stamp = (today or date.today()).isoformat()
    return f"wireframe-{stamp}.txt"


def build_saved_file(text: str, today: date | None = None) -> SavedFile:
    return SavedFile(filename=derive_filename(text, today), content=text, mime_type=TEXT_MIME_TYPE)


def write_saved_file(saved: SavedFile, directory: Path) -> Path:
    """Write ``saved`` into ``directory`` and return the file path.

    Raises:
        ExportError: If the directory cannot be created or the file written.
    """
    path = directory / saved.filename
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(saved.content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc
    logger.info("Saved wireframe to %s", path)
    return path


def document_name_for(content: str, filename: str) -> str:
    """Display name for loaded content: its title, else the file name without ``.txt``."""
    title = extract_title(content)
    if title:
        return title
    return filename[: -len(".txt")] if filename.endswith(".txt") else filename


def document_id_for(name: str) -> str:
    return f"loaded-{slugify(name)}"


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        # Encoding files are downloaded on first use; no estimate when offline.
        logger.debug("Token estimate unavailable", exc_info=True)
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
