"""Tests for the SVG renderer."""

from __future__ import annotations

from bs4 import BeautifulSoup
from lxml import etree

from wireframe2svg.renderer import escape_xml, render_svg
from wireframe2svg.schemas import RenderConfig


def _soup(svg: str) -> BeautifulSoup:
    return BeautifulSoup(svg, "xml")


class TestDocument:
    """Document envelope and canvas size."""

    def test_empty_text_is_minimal_canvas(self) -> None:
        svg = render_svg("")
        root = _soup(svg).find("svg")

        assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert root["width"] == "960"
        assert root["height"] == "80"
        assert root["viewBox"] == "0 0 960 80"
        assert "<!-- Original Title: Untitled -->" in svg
        assert "Purpose:" not in svg
        assert len(root.find_all("rect")) == 1

    def test_title_becomes_h1(self) -> None:
        soup = _soup(render_svg("Title: Checkout"))
        text = soup.find("text")

        assert text.get_text() == "Checkout"
        assert text["font-size"] == "32"
        assert text["font-weight"] == "bold"
        assert text["y"] == "72"
        # 40 padding + 32 + 16 element spacing + 8 small spacing + 40 padding
        assert soup.find("svg")["height"] == "136"

    def test_comments_carry_title_and_purpose(self) -> None:
        svg = render_svg("Title: Shop -- Home\nPurpose: Browse products")

        assert "<!-- Generated by wireframe2svg -->" in svg
        assert "<!-- Original Title: Shop - - Home -->" in svg
        assert "<!-- Purpose: Browse products -->" in svg

    def test_other_metadata_is_not_drawn(self) -> None:
        soup = _soup(render_svg("URL: /x\nRegions: main\nPage language: en"))

        assert soup.find("text") is None

    def test_custom_page_width(self) -> None:
        soup = _soup(render_svg("---", RenderConfig(page_width=600, padding=20)))
        line = soup.find("line")

        assert soup.find("svg")["width"] == "600"
        assert line["x1"] == "20"
        assert line["x2"] == "580"

    def test_control_characters_keep_document_well_formed(self) -> None:
        svg = render_svg("Title: Ring\x07side\n# Title\nHello\x01world\n[[Go\x0b]]")

        root = etree.fromstring(svg.encode("utf-8"))

        texts = [element.text for element in root.iter("{http://www.w3.org/2000/svg}text")]
        assert texts == ["Ring\ufffdside", "Title", "Hello\ufffdworld", "Go\ufffd"]
        assert "<!-- Original Title: Ring\ufffdside -->" in svg

    def test_output_is_well_formed_for_hostile_text(self) -> None:
        svg = render_svg('Title: "Q&A" <tips>\nFish & Chips\n<A "quoted" image>\n[[Yes & No]]')
        soup = _soup(svg)

        texts = [text.get_text() for text in soup.find_all("text")]
        assert texts == ['"Q&A" <tips>', "Fish & Chips", 'A "quoted" image', "Yes & No"]
        assert "Fish &amp; Chips" in svg


class TestElements:
    """Geometry of individual elements."""

    def test_button_minimum_width(self) -> None:
        group = _soup(render_svg("[[Go]]")).find("g", class_="button")
        rect = group.find("rect")
        label = group.find("text")

        assert rect["width"] == "120"
        assert rect["height"] == "40"
        assert rect["rx"] == "4"
        assert label["x"] == "100"
        assert label["y"] == "65"
        assert label["text-anchor"] == "middle"

    def test_button_width_grows_with_label(self) -> None:
        rect = _soup(render_svg("[[A very long button label]]")).find("rect", attrs={"rx": "4"})

        assert rect["width"] == str(24 * 8 + 2 * 24)

    def test_buttons_stack_vertically(self) -> None:
        rects = _soup(render_svg("[[One]] [[Two]]")).find_all("rect", attrs={"rx": "4"})

        assert [rect["y"] for rect in rects] == ["40", "96"]

    def test_input_field(self) -> None:
        group = _soup(render_svg("Email: [_____]")).find("g", class_="input-field")

        assert group.find("text").get_text() == "Email"
        assert group.find("text")["y"] == "52"
        assert group.find("rect")["y"] == "60"
        assert group.find("rect")["width"] == "880"

    def test_image_placeholder(self) -> None:
        group = _soup(render_svg("<Team photo>")).find("g", class_="image-placeholder")
        rect = group.find("rect")

        assert rect["x"] == "128"
        assert rect["width"] == "704"
        assert rect["height"] == "120"
        assert len(group.find_all("line")) == 2
        assert group.find("text").get_text() == "Team photo"

    def test_links_are_underlined_once_per_line(self) -> None:
        texts = _soup(render_svg("[Home](/) [About](/about)")).find_all("text")

        assert [text.get_text() for text in texts] == ["Home", "About"]
        assert {text["fill"] for text in texts} == {"#0066CC"}
        assert {text["text-decoration"] for text in texts} == {"underline"}
        assert [text["y"] for text in texts] == ["54", "84"]

    def test_skip_link_renders_as_link(self) -> None:
        text = _soup(render_svg("Skip to main content")).find("text")

        assert text["text-decoration"] == "underline"

    def test_list_item_bullet(self) -> None:
        group = _soup(render_svg("* Free returns")).find("g", class_="list-item")
        circle = group.find("circle")

        assert (circle["cx"], circle["cy"], circle["r"]) == ("50", "49", "3")
        assert group.find("text")["x"] == "65"

    def test_divider(self) -> None:
        line = _soup(render_svg("---")).find("line")

        assert (line["y1"], line["y2"]) == ("48", "48")
        assert line["x2"] == "920"


class TestLandmarks:
    """Landmark regions enclose their children."""

    def test_background_encloses_children(self) -> None:
        soup = _soup(render_svg("|| Main\n# Heading\n[[Go]]"))
        group = soup.find("g", class_="landmark")
        children = group.find_all(recursive=False)
        background = children[0]

        assert group["aria-label"] == "Main"
        assert background.name == "rect"
        assert background["y"] == "40"
        assert background["height"] == "140"
        assert background["stroke-dasharray"] == "4,4"
        assert [child.name for child in children] == ["rect", "text", "text", "g"]
        assert children[1].get_text() == "MAIN"
        assert children[2].get_text() == "Heading"

    def test_section_spacing_after_landmark(self) -> None:
        soup = _soup(render_svg("|| Main\n# Heading\n[[Go]]"))

        # children end at 172, then 40 section spacing and 40 padding
        assert soup.find("svg")["height"] == "252"

    def test_consecutive_landmarks_do_not_overlap(self) -> None:
        soup = _soup(render_svg("|| Header\n<Logo>\n|| Footer\n[Privacy](/privacy)"))
        header, footer = (group.find("rect") for group in soup.find_all("g", class_="landmark"))

        assert int(header["y"]) + int(header["height"]) < int(footer["y"])

    def test_login_example(self, login_wireframe: str) -> None:
        soup = _soup(render_svg(login_wireframe))

        assert [group["aria-label"] for group in soup.find_all("g", class_="landmark")] == [
            "Header",
            "Main",
            "Footer",
        ]
        assert len(soup.find_all("g", class_="button")) == 2
        assert len(soup.find_all("g", class_="input-field")) == 2


class TestEscapeXml:
    def test_replaces_characters_xml_cannot_carry(self) -> None:
        assert escape_xml("a\x00b\x1fc\ufffed\te\nf") == "a\ufffdb\ufffdc\ufffdd\te\nf"

    def test_escapes_all_specials(self) -> None:
        assert escape_xml("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;&apos;&amp;&apos;&lt;/a&gt;"
