"""Inspect the structure of a rendered wireframe SVG."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from bs4 import BeautifulSoup

from wireframe2svg.renderer import render_svg


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect SVG tags, classes, and attributes of a wireframe render.")
    parser.add_argument("--file", help="Wireframe text file to render and inspect")
    parser.add_argument("--svg", help="Existing SVG file to inspect")
    args = parser.parse_args()

    if not args.file and not args.svg:
        parser.error("Provide --file or --svg")

    svg = load_svg(text_path=args.file, svg_path=args.svg)
    soup = BeautifulSoup(svg, "xml")
    tags, classes, attrs = collect_stats(soup)

    print("Tags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")

    print("\nGroups:")
    for name, count in classes.most_common():
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attrs.most_common():
        print(f"{name}: {count}")


def load_svg(*, text_path: str | None, svg_path: str | None) -> str:
    path = Path(text_path or svg_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    content = path.read_text(encoding="utf-8")
    return render_svg(content) if text_path else content


def collect_stats(soup: BeautifulSoup) -> tuple[Counter, Counter, Counter]:
    tags = Counter()
    classes = Counter()
    attrs = Counter()

    for tag in soup.find_all(True):
        tags[tag.name] += 1
        for cls in tag.get("class", "").split():
            classes[cls] += 1
        for attr in tag.attrs:
            attrs[attr] += 1
    return tags, classes, attrs


if __name__ == "__main__":
    main()
