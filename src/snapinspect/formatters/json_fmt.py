"""JSON formatter."""

from __future__ import annotations

import json
import logging

from ..config import settings
from ..errors import SerializationError
from ..models import Report
from .base import BaseFormatter

logger = logging.getLogger(__name__)


class JsonFormatter(BaseFormatter):
    """Format a report as indented JSON that parses back into an equal report."""

    name = "json"

    def __init__(self, *, indent: int | None = None, sort_stats: bool | None = None) -> None:
        self.indent = settings.json_indent if indent is None else indent
        self.sort_stats = settings.json_sort_stats if sort_stats is None else sort_stats

    def format(self, report: Report) -> str:
        logger.debug("Rendering json report", extra={"types": len(report.stats)})
        try:
            return json.dumps(
                report.to_dict(sort_stats=self.sort_stats),
                ensure_ascii=False,
                indent=self.indent,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(
                code="serialization_failure",
                message=f"Failed to marshal snapshot stats: {e}",
                cause=str(e),
            ) from e
