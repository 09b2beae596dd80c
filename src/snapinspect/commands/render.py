"""Report render command handler."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..errors import InspectError
from ..formatters import get_formatter
from ..models import Report
from ..utils import output_text

logger = logging.getLogger(__name__)


def load_report(path: str) -> Report:
    """Read a report previously written with ``--format json``."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return Report.from_dict(data)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a stored report in the requested format."""
    try:
        report = load_report(args.report)
    except OSError as e:
        sys.stderr.write(f"Error: cannot read {args.report}: {e.strerror or e}\n")
        return 1
    except json.JSONDecodeError as e:
        sys.stderr.write(f"Error: {args.report} is not valid JSON: {e}\n")
        return 1
    except InspectError as e:
        logger.error("Report rejected", extra={"path": args.report, "code": e.code})
        sys.stderr.write(f"Error: {e.message}\n")
        return 1

    try:
        formatter = get_formatter(args.format)
        output = formatter.format(report)
    except InspectError as e:
        logger.error(
            "Render failed",
            extra={"path": args.report, "output_format": args.format, "code": e.code},
        )
        sys.stderr.write(f"Error: {e.message}\n")
        return 1

    output_text(output, args.output)
    return 0
