from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import slides2text
from slides2text.report import write_report

DEFAULT_INPUT_PATH = "docs/slides.pdf"
DEFAULT_OUTPUT_PATH = "docs/slides.extracted.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slides2text",
        description="Salvage the text of a PDF slide deck into a plain text report.",
    )
    parser.add_argument(
        "input_path",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Path to the PDF file (default: {DEFAULT_INPUT_PATH}).",
    )
    parser.add_argument(
        "output_path",
        nargs="?",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Path of the report to write (default: {DEFAULT_OUTPUT_PATH}).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"slides2text: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    try:
        result = next(slides2text.read_file(args.input_path))
        write_report(result, args.input_path, Path(args.output_path))
    except Exception as exc:
        print(f"slides2text: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote: {args.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
