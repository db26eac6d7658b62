"""Tests for the line classifier."""

from __future__ import annotations

import pytest

from wireframe2svg.classifier import LineCategory, classify_line, classify_lines, highlight_html


@pytest.mark.parametrize(
    ("line", "category"),
    [
        ("Title: Sign in", LineCategory.METADATA),
        ("Page purpose: Sign in", LineCategory.METADATA),
        ("Interactive Elements: 4", LineCategory.METADATA),
        ("# Heading", LineCategory.STRUCTURE),
        ("###### Deep heading", LineCategory.STRUCTURE),
        ("|| Main", LineCategory.STRUCTURE),
        ("[Hero Start]", LineCategory.LAYOUT),
        ("[Hero End]", LineCategory.LAYOUT),
        ("[2 Columns]", LineCategory.LAYOUT),
        ("[Sidebar]", LineCategory.LAYOUT),
        ("[Card/Block]", LineCategory.LAYOUT),
        ("---", LineCategory.LAYOUT),
        ("[[Submit]]", LineCategory.INTERACTION),
        ("[Read more](/more)", LineCategory.INTERACTION),
        ("<Team photo>", LineCategory.INTERACTION),
        ("Email: [_____]", LineCategory.INTERACTION),
        ("* First bullet", LineCategory.INTERACTION),
        ("   ______", LineCategory.INTERACTION),
        ("Just some words.", LineCategory.DEFAULT),
        ("", LineCategory.DEFAULT),
    ],
)
def test_classify_line(line: str, category: LineCategory) -> None:
    assert classify_line(line) == category


class TestPrecedence:
    """First matching category wins."""

    def test_metadata_beats_interaction(self) -> None:
        """A metadata line containing a link is still metadata."""
        assert classify_line("URL: [home](/)") == LineCategory.METADATA

    def test_structure_beats_interaction(self) -> None:
        assert classify_line("## [Linked heading](/x)") == LineCategory.STRUCTURE

    def test_layout_beats_interaction(self) -> None:
        assert classify_line("--- [Link]") == LineCategory.LAYOUT

    def test_only_star_bullets_are_highlighted(self) -> None:
        assert classify_line("* Star bullet") == LineCategory.INTERACTION
        assert classify_line("- Dash bullet") == LineCategory.DEFAULT

    def test_bare_purpose_is_not_highlighted_as_metadata(self) -> None:
        """Only the parser understands the short ``Purpose:`` key."""
        assert classify_line("Purpose: checkout") == LineCategory.DEFAULT


class TestClassifyLines:
    """Tests for classify_lines and highlight_html."""

    def test_empty_lines_display_as_space(self) -> None:
        result = classify_lines("# Title\n\nBody")

        assert result == [
            (LineCategory.STRUCTURE, "# Title"),
            (LineCategory.DEFAULT, " "),
            (LineCategory.DEFAULT, "Body"),
        ]

    def test_highlight_escapes_markup(self) -> None:
        html = highlight_html("<Logo & tagline>")

        assert html == '<span class="hl-interaction">&lt;Logo &amp; tagline&gt;</span>'

    def test_highlight_has_one_span_per_line(self) -> None:
        html = highlight_html("Title: A\n# B\n\n[[Go]]")

        assert html.split("\n") == [
            '<span class="hl-metadata">Title: A</span>',
            '<span class="hl-structure"># B</span>',
            '<span class="hl-default"> </span>',
            '<span class="hl-interaction">[[Go]]</span>',
        ]

    def test_css_class(self) -> None:
        assert LineCategory.LAYOUT.css_class == "hl-layout"
