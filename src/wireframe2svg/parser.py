"""Parse wireframe DSL text into metadata and an element tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Final, Iterable

from wireframe2svg.grammar import (
    BUTTON_RE,
    DIVIDER_LINES,
    HEADING_RE,
    IMAGE_RE,
    INPUT_RE,
    LANDMARK_PREFIX,
    LINK_RE,
    LIST_PREFIXES,
    SKIP_LINK_MARKER,
    is_placeholder_blank,
    match_metadata,
)
from wireframe2svg.schemas import (
    ButtonElement,
    DividerElement,
    Element,
    HeadingElement,
    ImageElement,
    InputElement,
    LandmarkElement,
    LeafElement,
    LinkElement,
    ListItemElement,
    ParsedWireframe,
    SkipLinkElement,
    TextElement,
)
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

LineMatcher = Callable[[str], "list[LeafElement] | None"]


@dataclass
class _ParseContext:
    """Mutable state of a single parse run."""

    metadata: dict[str, str] = field(default_factory=dict)
    elements: list[Element] = field(default_factory=list)
    landmark: LandmarkElement | None = None

    def emit(self, element: LeafElement) -> None:
        if self.landmark is not None:
            self.landmark.children.append(element)
        else:
            self.elements.append(element)

    def open_landmark(self, name: str) -> None:
        self.close_landmark()
        self.landmark = LandmarkElement(name=name)

    def close_landmark(self) -> None:
        if self.landmark is not None:
            self.elements.append(self.landmark)
            self.landmark = None


def _match_skip_link(line: str) -> list[LeafElement] | None:
    if SKIP_LINK_MARKER in line.lower():
        return [SkipLinkElement(text=line)]
    return None


def _match_heading(line: str) -> list[LeafElement] | None:
    match = HEADING_RE.match(line)
    if not match:
        return None
    return [HeadingElement(level=len(match.group(1)), text=match.group(2))]


def _match_buttons(line: str) -> list[LeafElement] | None:
    # Every [[...]] span on the line becomes a button; nothing else on it is parsed.
    texts = BUTTON_RE.findall(line)
    return [ButtonElement(text=text) for text in texts] or None


def _match_image(line: str) -> list[LeafElement] | None:
    match = IMAGE_RE.search(line)
    if not match:
        return None
    return [ImageElement(description=match.group(1))]


def _match_input(line: str) -> list[LeafElement] | None:
    match = INPUT_RE.match(line)
    if not match:
        return None
    return [InputElement(label=match.group(1).strip())]


def _match_links(line: str) -> list[LeafElement] | None:
    links = [
        LinkElement(text=text, url=url)
        for text, url in LINK_RE.findall(line)
        if not is_placeholder_blank(text)
    ]
    return links or None


def _match_divider(line: str) -> list[LeafElement] | None:
    return [DividerElement()] if line in DIVIDER_LINES else None


def _match_list_item(line: str) -> list[LeafElement] | None:
    if line.startswith(LIST_PREFIXES):
        return [ListItemElement(content=line[2:])]
    return None


def _match_text(line: str) -> list[LeafElement] | None:
    return [TextElement(content=line)]


# Element rules in priority order; the first rule that returns elements wins the line.
ELEMENT_RULES: Final[tuple[tuple[str, LineMatcher], ...]] = (
    ("skip-link", _match_skip_link),
    ("heading", _match_heading),
    ("button", _match_buttons),
    ("image", _match_image),
    ("input", _match_input),
    ("link", _match_links),
    ("divider", _match_divider),
    ("list-item", _match_list_item),
    ("text", _match_text),
)


def match_line(line: str) -> tuple[str, list[LeafElement]]:
    """Return the name of the winning rule and the elements it produced.

    ``line`` is expected to be stripped and non-empty.
    """
    for name, matcher in ELEMENT_RULES:
        elements = matcher(line)
        if elements:
            return name, elements
    # _match_text always matches; kept for type checkers.
    return "text", [TextElement(content=line)]


def parse_wireframe(text: str) -> ParsedWireframe:
    """Parse wireframe text into metadata and an ordered element tree.

    Blank lines separate content and produce nothing. Metadata lines are
    collected wherever they appear (the first value of each key is kept),
    ``|| Name`` opens a landmark that owns every following element until
    the next landmark or the end of the text, and every other line is
    matched against ``ELEMENT_RULES``. Unrecognised lines become text, so
    parsing never fails.
    """
    context = _ParseContext()

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        metadata = match_metadata(line)
        if metadata is not None:
            key, value = metadata
            context.metadata.setdefault(key, value)
            continue

        if line.startswith(LANDMARK_PREFIX):
            context.open_landmark(line[len(LANDMARK_PREFIX) :].strip())
            continue

        _, elements = match_line(line)
        for element in elements:
            context.emit(element)

    context.close_landmark()

    logger.debug(
        "Parsed wireframe: %d metadata keys, %d top-level elements",
        len(context.metadata),
        len(context.elements),
    )
    return ParsedWireframe(metadata=context.metadata, elements=context.elements)


def count_elements(elements: Iterable[Element]) -> int:
    """Count elements including landmark children."""
    total = 0
    for element in elements:
        total += 1
        if isinstance(element, LandmarkElement):
            total += count_elements(element.children)
    return total
