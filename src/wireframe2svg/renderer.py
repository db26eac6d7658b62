"""Render wireframe DSL text as an SVG mockup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable
from xml.sax.saxutils import escape

from wireframe2svg.parser import parse_wireframe
from wireframe2svg.schemas import (
    ButtonElement,
    Element,
    HeadingElement,
    ImageElement,
    InputElement,
    LandmarkElement,
    LinkElement,
    ListItemElement,
    RenderConfig,
    SkipLinkElement,
    TextElement,
)
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}
# Characters XML 1.0 does not allow in documents, even escaped.
_XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
_SVG_NS = "http://www.w3.org/2000/svg"


def escape_xml(text: str) -> str:
    """Escape the five XML special characters and replace characters XML cannot carry."""
    return escape(_XML_INVALID_RE.sub("\ufffd", text), _XML_ENTITIES)


def _comment(text: str) -> str:
    # "--" is not allowed inside XML comments.
    return escape_xml(text).replace("--", "- -")


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


@dataclass
class _RenderContext:
    """Vertical cursor and the primitives emitted so far."""

    y: int
    primitives: list[str] = field(default_factory=list)


class WireframeSvgRenderer:
    """Lay out parsed wireframe elements top to bottom on a fixed-width canvas."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._handlers: dict[str, Callable[[_RenderContext, Element], None]] = {
            "heading": self._render_heading_element,
            "button": self._render_button,
            "input": self._render_input,
            "image": self._render_image,
            "link": self._render_link,
            "skip-link": self._render_link,
            "text": self._render_text,
            "list-item": self._render_list_item,
            "divider": self._render_divider,
            "landmark": self._render_landmark,
        }

    def render(self, text: str) -> str:
        """Return a complete SVG document for ``text``. Never raises on DSL input."""
        parsed = parse_wireframe(text)
        context = _RenderContext(y=self.config.padding)

        title = parsed.metadata.get("Title")
        if title:
            self._render_heading(context, 1, title)
            context.y += self.config.spacing.small

        for element in parsed.elements:
            self._render_element(context, element)

        total_height = context.y + self.config.padding
        logger.debug("Rendered %d primitives, canvas height %d", len(context.primitives), total_height)
        return self._build_document(
            context.primitives,
            height=total_height,
            title=title,
            purpose=parsed.metadata.get("Page Purpose"),
        )

    def _build_document(
        self,
        primitives: list[str],
        *,
        height: int,
        title: str | None,
        purpose: str | None,
    ) -> str:
        width = self.config.page_width
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="{_SVG_NS}" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
            "  <!-- Generated by wireframe2svg -->",
            f"  <!-- Original Title: {_comment(title or 'Untitled')} -->",
        ]
        if purpose:
            lines.append(f"  <!-- Purpose: {_comment(purpose)} -->")
        lines.append(f'  <rect width="{width}" height="{height}" fill="{self.config.colors.background}"/>')
        lines.extend(f"  {primitive}" for primitive in primitives)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def _render_element(self, context: _RenderContext, element: Element) -> None:
        handler = self._handlers.get(element.type)
        if handler is not None:
            handler(context, element)

    def _text(
        self,
        x: float,
        y: float,
        content: str,
        *,
        size: int,
        fill: str,
        weight: str | None = None,
        anchor: str | None = None,
        decoration: str | None = None,
    ) -> str:
        attrs = [f'x="{_num(x)}"', f'y="{_num(y)}"', f'font-size="{size}"']
        if weight:
            attrs.append(f'font-weight="{weight}"')
        attrs.append(f'fill="{fill}"')
        attrs.append(f'font-family="{escape_xml(self.config.font_family)}"')
        if anchor:
            attrs.append(f'text-anchor="{anchor}"')
        if decoration:
            attrs.append(f'text-decoration="{decoration}"')
        return f"<text {' '.join(attrs)}>{escape_xml(content)}</text>"

    def _render_heading_element(self, context: _RenderContext, element: HeadingElement) -> None:
        self._render_heading(context, element.level, element.text)

    def _render_heading(self, context: _RenderContext, level: int, text: str) -> None:
        font = self.config.fonts.for_heading(level)
        y = context.y + font.size
        context.primitives.append(
            self._text(
                self.config.padding,
                y,
                text,
                size=font.size,
                weight=font.weight,
                fill=self.config.colors.text,
            )
        )
        context.y = y + self.config.spacing.element

    def _render_button(self, context: _RenderContext, element: ButtonElement) -> None:
        style = self.config.button
        colors = self.config.colors
        width = max(len(element.text) * style.char_width + style.padding_x * 2, style.min_width)
        x = self.config.padding
        y = context.y
        context.primitives.append(
            '<g class="button">'
            f'<rect x="{x}" y="{y}" width="{width}" height="{style.height}" rx="{style.border_radius}" '
            f'fill="{colors.button_bg}" stroke="{colors.button_border}" stroke-width="1"/>'
            + self._text(
                x + width / 2,
                y + style.height / 2 + 5,
                element.text,
                size=self.config.fonts.body.size,
                weight=self.config.fonts.body.weight,
                fill=colors.text,
                anchor="middle",
            )
            + "</g>"
        )
        context.y = y + style.height + self.config.spacing.element

    def _render_input(self, context: _RenderContext, element: InputElement) -> None:
        label_font = self.config.fonts.label
        style = self.config.input
        colors = self.config.colors
        label_y = context.y + label_font.size
        input_y = label_y + self.config.spacing.small
        context.primitives.append(
            '<g class="input-field">'
            + self._text(
                self.config.padding,
                label_y,
                element.label,
                size=label_font.size,
                weight=label_font.weight,
                fill=colors.text_light,
            )
            + f'<rect x="{self.config.padding}" y="{input_y}" width="{self.config.content_width}" '
            f'height="{style.height}" rx="{style.border_radius}" fill="{colors.background}" '
            f'stroke="{colors.border}" stroke-width="1"/>'
            "</g>"
        )
        context.y = input_y + style.height + self.config.spacing.element

    def _render_image(self, context: _RenderContext, element: ImageElement) -> None:
        colors = self.config.colors
        content_width = self.config.content_width
        width = content_width * self.config.image.default_width
        height = self.config.image.min_height
        x = self.config.padding + (content_width - width) / 2
        y = context.y
        box = f'x="{_num(x)}" y="{y}" width="{_num(width)}" height="{height}"'
        context.primitives.append(
            '<g class="image-placeholder">'
            f'<rect {box} fill="{colors.image_placeholder}" stroke="{colors.border}" stroke-width="1"/>'
            f'<line x1="{_num(x)}" y1="{y}" x2="{_num(x + width)}" y2="{y + height}" '
            f'stroke="{colors.border}" stroke-width="1"/>'
            f'<line x1="{_num(x + width)}" y1="{y}" x2="{_num(x)}" y2="{y + height}" '
            f'stroke="{colors.border}" stroke-width="1"/>'
            + self._text(
                x + width / 2,
                y + height / 2 + 5,
                element.description,
                size=self.config.fonts.label.size,
                fill=colors.text_light,
                anchor="middle",
            )
            + "</g>"
        )
        context.y = y + height + self.config.spacing.element

    def _render_link(self, context: _RenderContext, element: LinkElement | SkipLinkElement) -> None:
        y = context.y + self.config.fonts.body.size
        context.primitives.append(
            self._text(
                self.config.padding,
                y,
                element.text,
                size=self.config.fonts.body.size,
                fill=self.config.colors.link,
                decoration="underline",
            )
        )
        context.y = y + self.config.spacing.element

    def _render_text(self, context: _RenderContext, element: TextElement) -> None:
        y = context.y + self.config.fonts.body.size
        context.primitives.append(
            self._text(
                self.config.padding,
                y,
                element.content,
                size=self.config.fonts.body.size,
                fill=self.config.colors.text,
            )
        )
        context.y = y + self.config.spacing.element

    def _render_list_item(self, context: _RenderContext, element: ListItemElement) -> None:
        y = context.y + self.config.fonts.body.size
        bullet_x = self.config.padding + 10
        context.primitives.append(
            '<g class="list-item">'
            f'<circle cx="{bullet_x}" cy="{y - 5}" r="3" fill="{self.config.colors.text}"/>'
            + self._text(
                bullet_x + 15,
                y,
                element.content,
                size=self.config.fonts.body.size,
                fill=self.config.colors.text,
            )
            + "</g>"
        )
        context.y = y + self.config.spacing.element

    def _render_divider(self, context: _RenderContext, element: Element) -> None:
        y = context.y + self.config.spacing.small
        context.primitives.append(
            f'<line x1="{self.config.padding}" y1="{y}" '
            f'x2="{self.config.padding + self.config.content_width}" y2="{y}" '
            f'stroke="{self.config.colors.border}" stroke-width="1"/>'
        )
        context.y = y + self.config.spacing.element

    def _render_landmark(self, context: _RenderContext, element: LandmarkElement) -> None:
        # Children are laid out first so the background rect can enclose them,
        # then the rect is emitted ahead of them to paint underneath.
        colors = self.config.colors
        label_font = self.config.fonts.label
        start_y = context.y

        inner = _RenderContext(y=start_y)
        label_y = inner.y + label_font.size
        inner.primitives.append(
            self._text(
                self.config.padding,
                label_y,
                element.name.upper(),
                size=label_font.size,
                weight="bold",
                fill=colors.text_light,
            )
        )
        inner.y = label_y + self.config.spacing.element
        for child in element.children:
            self._render_element(inner, child)

        height = inner.y - start_y + self.config.spacing.small
        background = (
            f'<rect x="{_num(self.config.padding / 2)}" y="{start_y}" '
            f'width="{self.config.page_width - self.config.padding}" height="{height}" '
            f'fill="{colors.landmark_bg}" stroke="{colors.border}" stroke-width="1" stroke-dasharray="4,4"/>'
        )
        context.primitives.append(f'<g class="landmark" aria-label="{escape_xml(element.name)}">')
        context.primitives.append(background)
        context.primitives.extend(inner.primitives)
        context.primitives.append("</g>")
        context.y = inner.y + self.config.spacing.section


def render_svg(text: str, config: RenderConfig | None = None) -> str:
    """Render wireframe text to an SVG document string."""
    return WireframeSvgRenderer(config).render(text)
