"""
ctxslides/cli.py -- Command-line entry point.

Reads pandoc JSON and writes a ConTeXt slide deck.

Usage:
    pandoc -t json talk.md | context-slides > talk.tex
    context-slides talk.json -o talk.tex

Options:
    -o, --output FILE        Where to write the ConTeXt source (default: stdout)
    --raw-block MODE         "passthrough" | "fail" (default: passthrough)
    --verbose                Show debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ctxslides.config import RAW_BLOCK_MODES, ConverterConfig
from ctxslides.errors import ConversionError, MalformedInput
from ctxslides.services.converter import SlideConverter

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="context-slides",
        description="Convert pandoc JSON into ConTeXt presentation slides.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    ap.add_argument("input", nargs="?", default="-", help="Pandoc JSON file (default: stdin)")
    ap.add_argument("-o", "--output", default="-", help="Output file (default: stdout)")
    ap.add_argument(
        "--raw-block",
        default="passthrough",
        choices=list(RAW_BLOCK_MODES),
        help="How to handle RawBlock nodes (default: passthrough)",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def read_input(path: str) -> str:
    """Read the whole input, from stdin when ``path`` is "-".

    Raises:
        MalformedInput: the input is not valid UTF-8.
        OSError: the file cannot be opened or read.
    """
    try:
        if path == "-":
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInput(f"input is not valid UTF-8: {e}") from e


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    converter = SlideConverter(ConverterConfig(raw_block=args.raw_block))
    try:
        result = converter.convert(read_input(args.input))
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1
    except ConversionError as e:
        logger.error("Conversion failed: %s", e)
        return 1

    if args.output == "-":
        sys.stdout.write(result.output)
    else:
        Path(args.output).write_text(result.output, encoding="utf-8")
        logger.info("Wrote %d slides to %s", result.slide_count, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
