"""Command-line converter from wireframe text files to SVG."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wireframe2svg.renderer import render_svg
from wireframe2svg.utils.logging_config import configure_logging, get_logger
from wireframe2svg.validator import validate_wireframe

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wireframe2svg",
        description="Convert a text wireframe into an SVG mockup.",
    )
    parser.add_argument("input", type=Path, help="Wireframe text file (e.g. examples/login.txt)")
    parser.add_argument("output", type=Path, nargs="?", help="SVG file to write (default: INPUT with .svg)")
    parser.add_argument("--validate", action="store_true", help="Print accessibility issues to stderr")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WIREFRAME2SVG_LOG_LEVEL)")
    return parser


def default_output_path(input_path: Path) -> Path:
    if input_path.suffix == ".txt":
        return input_path.with_suffix(".svg")
    return input_path.with_name(input_path.name + ".svg")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    output_path: Path = args.output or default_output_path(args.input)

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    if args.validate:
        for diagnostic in validate_wireframe(text):
            print(f"warning: {diagnostic.message}", file=sys.stderr)

    svg = render_svg(text)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(svg, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write {output_path}: {exc}", file=sys.stderr)
        return 1

    size_kb = len(svg.encode("utf-8")) / 1024
    logger.debug("Wrote %s", output_path)
    print(f"SVG generated: {output_path}")
    print(f"  Size: {size_kb:.2f} KB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
