"""Command-line entry point: ``dalton DATASET [COMMAND ...]``."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from dalton.construction import load_settings
from dalton.errors import CatalogLoadError
from dalton.logging_config import setup_logging
from dalton.model import Settings
from dalton.viewer import Command, Viewer, parse_command

logger = logging.getLogger(__name__)

_EPILOG = f"""\
commands (applied in order after the dataset is loaded):
  {' '.join(c.value for c in Command if c is not Command.LOAD)}
  Load=PATH replaces the dataset.

examples:
  dalton water.txt FromBack --output back.png
  dalton water.txt PanRight PanRight TiltTop --output pan.svg
  dalton water.txt --interactive
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for :func:`main`."""
    parser = argparse.ArgumentParser(
        prog="dalton",
        description="Render a molecule as depth-ordered circles.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument("dataset", help="dataset file of '<element> <x> <y> <z>' records")
    parser.add_argument(
        "commands", nargs="*", type=parse_command, metavar="COMMAND",
        help="view commands to apply, e.g. FromLeft PanRight ZoomIn",
    )
    parser.add_argument("--catalog", help="element table (overrides the settings file)")
    parser.add_argument("--settings", help="JSON settings file")
    parser.add_argument("--output", help="save the final view to this image file")
    parser.add_argument(
        "--interactive", action="store_true",
        help="open a window driven by keyboard commands",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: INFO)",
    )
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the viewer from the command line.

    Returns:
        Process exit status: ``0`` on success, ``1`` if the settings file
        or the element table cannot be loaded, ``2`` if the initial
        dataset cannot be loaded.
    """
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    settings = Settings()
    if args.settings:
        try:
            settings = load_settings(args.settings)
        except (OSError, TypeError, ValueError) as exc:
            logger.critical(f"Reading settings file {args.settings} FAILED: {exc}")
            logger.critical("Program will now close")
            return 1
    if args.catalog:
        settings = replace(settings, catalog_path=args.catalog)

    logger.info(f"Reading the element table {settings.catalog_path} ...")
    try:
        viewer = Viewer.from_settings(settings)
    except CatalogLoadError as exc:
        logger.critical(f"Reading element table FAILED: {exc}")
        logger.critical("Program will now close")
        return 1

    if not viewer.load(args.dataset):
        return 2

    for command, path in args.commands:
        viewer.execute(command, path)

    for i, point in enumerate(viewer.ordered_points()):
        logger.info(
            f"{i:4d} {point.element:<10s} "
            f"({point.x:g}, {point.y:g}, {point.z:g}) r={point.radius:g}"
        )

    if args.output:
        viewer.render_mpl(args.output, show=False)

    if args.interactive:
        viewer.render_mpl_interactive()

    return 0
