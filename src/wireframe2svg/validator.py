"""Accessibility checks over raw wireframe text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from wireframe2svg.grammar import LINK_RE, METADATA_LINE_RE, RAW_HEADING_RE, is_placeholder_blank
from wireframe2svg.schemas import Diagnostic, DiagnosticCode
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

_NO_URL: Final = "NO_URL"


@dataclass(frozen=True)
class HeadingRecord:
    """A heading found on a source line."""

    level: int
    line_number: int


@dataclass
class _LinkOccurrences:
    text: str
    url: str
    lines: list[int] = field(default_factory=list)


def validate_wireframe(text: str) -> list[Diagnostic]:
    """Run every accessibility check and collect their findings in order.

    The checks are independent: each one rescans the text and all of them
    run even when an earlier check reports a problem. Findings are advisory
    and validation never raises.
    """
    lines = text.split("\n")
    headings = collect_headings(lines)

    diagnostics: list[Diagnostic] = []
    diagnostics.extend(check_first_heading(headings))
    diagnostics.extend(check_single_h1(headings))
    diagnostics.extend(check_heading_levels(headings))
    diagnostics.extend(check_metadata_blocks(lines))
    diagnostics.extend(check_duplicate_links(lines))

    logger.debug("Validated %d lines: %d diagnostics", len(lines), len(diagnostics))
    return diagnostics


def collect_headings(lines: list[str]) -> list[HeadingRecord]:
    """Return the headings of the document in source order."""
    headings: list[HeadingRecord] = []
    for index, line in enumerate(lines):
        match = RAW_HEADING_RE.match(line)
        if match:
            headings.append(HeadingRecord(level=len(match.group(1)), line_number=index + 1))
    return headings


def check_first_heading(headings: list[HeadingRecord]) -> list[Diagnostic]:
    """The first heading of a page should be its H1."""
    if not headings or headings[0].level == 1:
        return []
    first = headings[0]
    return [
        Diagnostic(
            code=DiagnosticCode.FIRST_HEADING_NOT_H1,
            message=f"First heading should be H1 (found H{first.level} on line {first.line_number})",
            lines=[first.line_number],
        )
    ]


def check_single_h1(headings: list[HeadingRecord]) -> list[Diagnostic]:
    """A page should have exactly one top-level heading."""
    h1_lines = [heading.line_number for heading in headings if heading.level == 1]
    if len(h1_lines) <= 1:
        return []
    return [
        Diagnostic(
            code=DiagnosticCode.MULTIPLE_H1,
            message=f"Page should have only one H1 (found {len(h1_lines)})",
            lines=h1_lines,
        )
    ]


def check_heading_levels(headings: list[HeadingRecord]) -> list[Diagnostic]:
    """Headings may go back up any number of levels but only down by one."""
    diagnostics: list[Diagnostic] = []
    for previous, current in zip(headings, headings[1:]):
        if current.level > previous.level + 1:
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.HEADING_LEVEL_SKIP,
                    message=(
                        f"Heading skips from H{previous.level} to H{current.level} "
                        f"on line {current.line_number}"
                    ),
                    lines=[current.line_number],
                )
            )
    return diagnostics


def count_metadata_blocks(lines: list[str]) -> tuple[int, list[int]]:
    """Count metadata blocks and return the line numbers of stray metadata.

    The leading run of metadata lines counts once. Once any other non-blank
    line has been seen, every further metadata line adds one to the count.
    """
    blocks = 0
    stray_lines: list[int] = []
    seen_content = False

    for index, line in enumerate(lines):
        is_metadata = bool(METADATA_LINE_RE.match(line))
        if is_metadata and not seen_content:
            blocks = 1
        elif is_metadata:
            blocks += 1
            stray_lines.append(index + 1)

        if line.strip() and not is_metadata:
            seen_content = True

    return blocks, stray_lines


def check_metadata_blocks(lines: list[str]) -> list[Diagnostic]:
    """A page should describe itself in one metadata block."""
    blocks, stray_lines = count_metadata_blocks(lines)
    if blocks <= 1:
        return []
    return [
        Diagnostic(
            code=DiagnosticCode.MULTIPLE_METADATA_BLOCKS,
            message=f"Page should have only one metadata block (found {blocks})",
            lines=stray_lines,
        )
    ]


def check_duplicate_links(lines: list[str]) -> list[Diagnostic]:
    """Links sharing text and destination on several lines are ambiguous.

    This scans every ``[text]`` and ``[text](url)`` span in the raw text,
    including spans inside headings and ``[[button]]`` markup, and ignores
    underscore-only form blanks. Links without a URL share one key per text.
    """
    occurrences: dict[str, _LinkOccurrences] = {}

    for index, line in enumerate(lines):
        for match in LINK_RE.finditer(line):
            text = match.group(1).strip()
            url = (match.group(2) or "").strip()
            if is_placeholder_blank(text):
                continue
            key = f"{text}|{url or _NO_URL}"
            occurrences.setdefault(key, _LinkOccurrences(text=text, url=url)).lines.append(index + 1)

    diagnostics: list[Diagnostic] = []
    for link in occurrences.values():
        if len(link.lines) <= 1:
            continue
        location = f" → {link.url}" if link.url else ""
        line_list = ", ".join(str(number) for number in link.lines)
        diagnostics.append(
            Diagnostic(
                code=DiagnosticCode.DUPLICATE_LINK,
                message=f'Duplicate links detected: "{link.text}"{location} appears on lines {line_list}',
                lines=list(link.lines),
            )
        )
    return diagnostics
