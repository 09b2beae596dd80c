"""CLI interface for snapinspect."""

from __future__ import annotations

import argparse
import sys

from .commands.info import cmd_formats, cmd_version
from .commands.render import cmd_render
from .config import settings
from .formatters import get_supported_formats
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="snapinspect",
        description="Render snapshot inspection reports",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    formats = get_supported_formats()
    default_format = settings.default_format if settings.default_format in formats else formats[0]

    # render command
    p_render = subparsers.add_parser(
        "render",
        help="Render a JSON report file",
    )
    p_render.add_argument(
        "report",
        type=str,
        help="Path to a report written with --format json",
    )
    p_render.add_argument(
        "--format",
        "-f",
        choices=formats,
        default=default_format,
        help=f"Output format (default: {default_format})",
    )
    p_render.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )
    p_render.set_defaults(func=cmd_render)

    # formats command
    p_formats = subparsers.add_parser(
        "formats",
        help="List supported output formats",
    )
    p_formats.set_defaults(func=cmd_formats)

    # version command
    p_version = subparsers.add_parser(
        "version",
        help="Show version",
    )
    p_version.set_defaults(func=cmd_version)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        sys.stdout.write(f"snapinspect version {__version__}\n")
        raise SystemExit(0)

    if not args.command:
        parser.print_help()
        raise SystemExit(0)

    rc = int(args.func(args))
    raise SystemExit(rc)
