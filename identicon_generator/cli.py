"""Command line entry point.

``identicon-generator NAME [NAME ...]`` renders and saves one image per name.
Exit status is 0 if every image was saved and 1 if any input could not be
encoded or written.
"""

import argparse
import logging
from typing import List, Optional

from identicon_generator.config import (
    DEFAULT_CONFIG,
    IdenticonConfig,
    parse_color,
)
from identicon_generator.errors import InputEncodingError
from identicon_generator.pipeline import generate_and_save
from identicon_generator.writer import ENCODER_REGISTRY, ImageWriter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon-generator",
        description="Generate symmetric 5x5 identicons from strings.",
    )
    parser.add_argument("names", nargs="+", metavar="NAME", help="input string(s)")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_CONFIG.output_dir,
        help="directory to write images to (default: %(default)s)",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="image_format",
        choices=sorted(ENCODER_REGISTRY),
        default=DEFAULT_CONFIG.image_format,
        help="output image format (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--background",
        type=parse_color,
        default=DEFAULT_CONFIG.background,
        help="background color as #RRGGBB or #RRGGBBAA (default: transparent)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = IdenticonConfig(
        background=args.background,
        image_format=args.image_format,
        output_dir=args.output_dir,
    )
    writer = ImageWriter(config)

    failures = 0
    for name in args.names:
        try:
            result = generate_and_save(name, config=config, writer=writer)
        except InputEncodingError as exc:
            logger.error("%s", exc)
            failures += 1
            continue
        if result.ok:
            print(result.path)
        else:
            failures += 1
    return 1 if failures else 0
