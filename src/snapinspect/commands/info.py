"""Formats and version command handlers."""

from __future__ import annotations

import argparse
import sys

from ..formatters import get_supported_formats


def cmd_formats(args: argparse.Namespace) -> int:
    """List supported output formats."""
    for name in get_supported_formats():
        sys.stdout.write(name + "\n")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version."""
    from .. import __version__

    sys.stdout.write(f"snapinspect version {__version__}\n")
    return 0
