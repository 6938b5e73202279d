"""
Command-line dump tool for GMD and ITM files.
Usage: python -m mhw_data_reader {gmd,itm} FILE [options]
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import DecodeError
from .itm.linker import NameLinker
from .loaders import DocumentFileLoader
from .render import FORMATS, DocumentRenderer
from .settings import AppSettings, ConfigError
from .settings.logging import VALID_LEVELS
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mhw-data-reader",
        description="Decode GMD string tables and ITM item catalogs and dump them to stdout.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--format", choices=FORMATS, default="text", help="Output format (default: text)"
    )
    parser.add_argument(
        "--settings", metavar="FILE", help="Use an INI settings file instead of the platform store"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LEVELS,
        help="Console log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    gmd_parser = subparsers.add_parser("gmd", help="Parse a GMD file and dump its entries")
    gmd_parser.add_argument("input", metavar="FILE", help="GMD file to load")

    itm_parser = subparsers.add_parser("itm", help="Parse an ITM file and dump its entries")
    itm_parser.add_argument("input", metavar="FILE", help="ITM file to load")
    itm_parser.add_argument(
        "-l", "--link", metavar="GMD_FILE", help="Load a GMD file and link item names from it"
    )
    itm_parser.add_argument("--stride", type=int, help="GMD entries per item (overrides settings)")
    itm_parser.add_argument("--offset", type=int, help="Name position within each item's entries")

    return parser


def run(args: argparse.Namespace, settings: AppSettings) -> str:
    """Execute the parsed command and return the rendered output."""
    logger = logging.getLogger(f"{__name__}.run")
    loader = DocumentFileLoader()
    renderer = DocumentRenderer(args.format)

    if args.command == "gmd":
        return renderer.render_gmd(loader.load_gmd(args.input))

    document = loader.load_itm(args.input)
    if args.link:
        stride = args.stride if args.stride is not None else settings.name_stride
        offset = args.offset if args.offset is not None else settings.name_offset
        linker = NameLinker(stride=stride, offset=offset)
        result = linker.link(document, loader.load_gmd(args.link))
        logger.info(str(result))
    return renderer.render_itm(document)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(settings_file=args.settings)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings, console_level=args.log_level)

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"Configuration warning: {warning}")
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(f"Configuration error: {error}")
        print("error: configuration validation failed", file=sys.stderr)
        return 1

    try:
        output = run(args, settings)
    except (DecodeError, OSError, ValueError) as e:
        logger.debug(f"{args.command} failed: {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
