from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from spritepack import config
from spritepack import pipeline
from spritepack.config import PackOptions
from spritepack.errors import DecodeError, PackError


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritepack",
        description="Pack equally-sized sprites into one atlas PNG per size plus a JSON map.",
    )
    parser.add_argument("--in", dest="input_dir", type=Path, default=config.INPUT_DIR,
                        help="Input directory containing individual sprites")
    parser.add_argument("--out", dest="output_dir", type=Path, default=config.OUTPUT_DIR,
                        help="Output directory for sheets and json")
    parser.add_argument("--name", dest="base_name", default=config.BASE_NAME,
                        help="Base filename for output files")
    parser.add_argument("--path", dest="base_path", default=None,
                        help="Directory prefix for sheet keys in the json metadata")
    parser.add_argument("--padding", type=_non_negative, default=config.PADDING,
                        help="Pixels reserved around each sprite (0 to disable)")
    parser.add_argument("--workers", type=_positive, default=config.DEFAULT_WORKERS,
                        help="Maximum concurrent decode/sheet tasks")
    parser.add_argument("--shrink-rows", action="store_true",
                        help="Drop empty trailing rows instead of keeping sheets square")
    parser.add_argument("--no-extrude", dest="edge_replicate", action="store_false",
                        help="Leave padding transparent instead of repeating edge pixels")
    parser.add_argument("--pixi", action="store_true",
                        help="Also write a PixiJS spritesheet json per sheet")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def options_from_args(args: argparse.Namespace) -> PackOptions:
    return PackOptions(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        base_name=args.base_name,
        base_path=args.base_path or None,
        padding=args.padding,
        workers=args.workers,
        shrink_rows=args.shrink_rows,
        edge_replicate=args.edge_replicate,
        pixi=args.pixi,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        options = options_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        pipeline.pack(options)
    except DecodeError as exc:
        logging.error("%s could not be decoded.", exc.path)
        logging.error("%s", exc.__cause__ or exc)
        return 1
    except PackError as exc:
        logging.error("Packing failed: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
