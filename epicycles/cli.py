"""Command-line entry point: SVG path → epicycle animation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from epicycles import __version__
from epicycles.config import settings
from epicycles.errors import EpicycleError
from epicycles.models.options import AnimationOptions, OutputMode
from epicycles.render import animate

logger = logging.getLogger("epicycles")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epicycles",
        description="Makes an animation from given svg path",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("file", metavar="FILE", help="Sets the input file to use")
    parser.add_argument("-o", "--out", help="Sets the output file or directory")
    parser.add_argument("-f", "--frames", type=int, help="Sets the number of frames in a full circle")
    parser.add_argument("--dur", type=float, help="Sets the duration of the animation")
    parser.add_argument("-d", "--depth", type=int, help="Sets the depth of transform")
    parser.add_argument("--merge", action="store_true", help="Merges all the paths in file to a single path")
    parser.add_argument("--offset", type=float, nargs=2, metavar=("X", "Y"), help="Sets offset")
    parser.add_argument("--sw", type=float, help="Sets stroke width in svg")
    parser.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in OutputMode],
        default=OutputMode.SVG.value,
        help="Sets the output mode",
    )
    parser.add_argument("--back", help="Sets background color (fill attribute)")
    parser.add_argument("--log-level", default=settings.epicycles_log_level, help="Logging level")
    return parser


def options_from_args(args: argparse.Namespace) -> AnimationOptions:
    """Build validated options, leaving unset flags to the configured defaults."""
    given = {
        "depth": args.depth,
        "frames": args.frames,
        "duration": args.dur,
        "stroke_width": args.sw,
        "background": args.back,
        "offset": tuple(args.offset) if args.offset else None,
        "output": Path(args.out) if args.out else None,
    }
    return AnimationOptions(
        mode=OutputMode(args.mode),
        merge=args.merge,
        **{k: v for k, v in given.items() if v is not None},
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        options = options_from_args(args)
    except ValidationError as e:
        logger.error("Invalid options:\n%s", e)
        return 2

    source = Path(args.file)
    try:
        svg_text = source.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Could not read .svg file %s: %s", source, e)
        return 1

    try:
        output = animate(svg_text, options, options.output_path(source))
    except EpicycleError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
