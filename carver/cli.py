"""
Command-line entry point.

Run:
    carver -i input.jpg -o output.png -m vertical -p 50
    python -m carver -i input.jpg -o output.png -m horizontal -p 10 --debug
"""

import argparse
import logging
import sys

from .carving import carve_image
from .debug import PngDebugSink
from .errors import CarverError
from .image_io import load_image, save_image
from .orientation import Direction

logger = logging.getLogger(__name__)

MAX_PASSES = 255


def pass_count(value: str) -> int:
    """argparse type for --passes: an integer in [0, 255]."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pass count: {value!r}")
    if not 0 <= n <= MAX_PASSES:
        raise argparse.ArgumentTypeError(f"pass count must be between 0 and {MAX_PASSES}, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='carver',
        description="Resize images with a seam carving algorithm"
    )
    parser.add_argument(
        '-i', '--input', type=str, required=True,
        help='Path to the input image'
    )
    parser.add_argument(
        '-o', '--output', type=str, required=True,
        help='Path to the output image (written as PNG)'
    )
    parser.add_argument(
        '-m', '--mode', type=str, required=True,
        choices=[d.value for d in Direction],
        help='Carver mode: vertical seams narrow the image, horizontal seams shorten it'
    )
    parser.add_argument(
        '-p', '--passes', type=pass_count, default=1,
        help='Number of passes (seams to carve, default: 1)'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='Write the energy map with the chosen seam for every pass'
    )
    parser.add_argument(
        '--debug-dir', type=str, default='.',
        help='Directory for debug-<pass>.png files (default: current directory)'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Log every pass'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        image = load_image(args.input)
        logger.info("Carving %d %s seams from %dx%d image",
                    args.passes, args.mode, image.shape[2], image.shape[1])

        sink = PngDebugSink(args.debug_dir) if args.debug else None
        carved = carve_image(image, args.passes, direction=args.mode,
                             debug=args.debug, sink=sink)

        save_image(carved, args.output)
    except CarverError as e:
        logger.error("%s", e)
        return 1

    print(f"Saved: {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
