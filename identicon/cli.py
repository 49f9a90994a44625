"""Command line entry point: ``python -m identicon INPUT``."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from identicon.config import RenderConfig, parse_hex_color
from identicon.pipeline import main as run_pipeline
from identicon.types import InvalidInputError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Write a deterministic 250x250 identicon PNG for a string.",
    )
    parser.add_argument("input", help="string to derive the identicon from")
    parser.add_argument(
        "-o", "--output-dir", default=".", help="directory for <input>.png"
    )
    parser.add_argument(
        "--background", default="#ffffff", help="background colour as #rrggbb"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every pipeline stage"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        background = parse_hex_color(args.background)
    except InvalidInputError as e:
        parser.error(str(e))

    try:
        path = run_pipeline(
            args.input, args.output_dir, RenderConfig(background=background)
        )
    except OSError as e:
        logger.error("Could not write identicon for %r: %s", args.input, e)
        return 1

    # Raw bytes so undecodable argv input round-trips to the terminal.
    sys.stdout.flush()
    sys.stdout.buffer.write(os.fsencode(path) + b"\n")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
