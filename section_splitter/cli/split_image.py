import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from ..config import get_settings
from ..errors import ErrorKind, SectionSplitterError
from ..pipeline.split_sections import split_sections

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ErrorKind.FILE_NOT_FOUND: 2,
    ErrorKind.DECODE_FAILED: 3,
    ErrorKind.NO_CONTENT_FOUND: 4,
    ErrorKind.INVALID_PARTITION: 5,
    ErrorKind.EXPORT_FAILED: 6,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="section-splitter",
        description="Split an image into top, middle and bottom sections "
                    "along its two dividing lines.",
    )
    parser.add_argument("input", help="image to split (PNG with alpha)")
    parser.add_argument("-o", "--output-dir",
                        help="where to write the sections (default: next to the input)")
    parser.add_argument("--threshold", type=float,
                        help="row colour difference that counts as a dividing line")
    parser.add_argument("--max-line-thickness", type=int,
                        help="rows consumed by each dividing line")
    parser.add_argument("--log-level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except RuntimeError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return 1

    overrides = {}
    if args.threshold is not None:
        overrides["diff_threshold"] = args.threshold
    if args.max_line_thickness is not None:
        if args.max_line_thickness < 1:
            print("--max-line-thickness must be positive", file=sys.stderr)
            return 1
        overrides["max_line_thickness"] = args.max_line_thickness
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = replace(settings, **overrides)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        result = split_sections(args.input, args.output_dir, settings=settings)
    except SectionSplitterError as err:
        logger.error("Error processing image: %s: %s", err.kind.value, err)
        return EXIT_CODES[err.kind]

    if result.detection.fallback:
        logger.info("Sections split at equal thirds")
    for name, path in result.section_paths.items():
        logger.info("%-6s -> %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
