"""Command line entry point.

Usage::

    identicon INPUT [INPUT ...] [-o OUTPUT_DIR] [--name NAME] [--log-level LEVEL]

Writes ``<OUTPUT_DIR>/<INPUT>.png`` for every input and prints the written
paths. Exits with status 1 if rendering or saving fails.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from identicon.config import configure_logging, load_config
from identicon.errors import IdenticonError
from identicon.pipeline import main as generate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate deterministic 5x5 identicon PNGs from strings.",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="Input string(s)")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory to write images to (default: $IDENTICON_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="File name (without extension) to use instead of the input; "
        "only valid with a single input",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: $IDENTICON_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.name is not None and len(args.inputs) > 1:
        parser.error("--name can only be used with a single input")

    try:
        config = load_config().with_overrides(
            output_dir=args.output_dir, log_level=args.log_level
        )
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(config)

    written: List[str] = []
    for input in args.inputs:
        try:
            path = generate(input, output_dir=config.output_dir, identifier=args.name)
        except IdenticonError as exc:
            logger.error("Could not generate identicon for %r: %s", input, exc)
            return 1
        written.append(path)
        print(path)
    logger.info("Generated %d identicon(s)", len(written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
