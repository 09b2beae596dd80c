"""Tabular formatter for human-readable output."""

from __future__ import annotations

import logging

from ..config import settings
from ..models import Report
from ..utils import byte_size
from .base import BaseFormatter

logger = logging.getLogger(__name__)

SEPARATOR = "----"


def align_columns(text: str, *, min_width: int, padding: int) -> str:
    """Expand tab-terminated cells into space-padded columns.

    Elastic tabstops: a column block is a run of consecutive lines that all
    have a tab-terminated cell in that column, and every cell of the block is
    padded to ``max(min_width, widest cell + padding)``. Text after the last
    tab of a line is not part of any column and is written unchanged.
    """
    rows = [line.split("\t") for line in text.split("\n")]
    out: list[str] = []

    def write_lines(widths: list[int], start: int, end: int) -> None:
        for cells in rows[start:end]:
            out.append(
                "".join(
                    cell.ljust(widths[j]) if j < len(widths) else cell
                    for j, cell in enumerate(cells)
                )
            )

    def format_block(widths: list[int], start: int, end: int) -> None:
        column = len(widths)
        line0 = this = start
        while this < end:
            if column >= len(rows[this]) - 1:
                this += 1
                continue

            write_lines(widths, line0, this)
            line0 = this
            width = min_width
            while this < end and column < len(rows[this]) - 1:
                width = max(width, len(rows[this][column]) + padding)
                this += 1

            format_block([*widths, width], line0, this)
            line0 = this

        write_lines(widths, line0, end)

    format_block([], 0, len(rows))
    return "\n".join(out)


class PrettyFormatter(BaseFormatter):
    """Format a report as aligned columns: metadata, per-type table, total."""

    name = "pretty"

    def __init__(self, *, min_width: int | None = None, padding: int | None = None) -> None:
        self.min_width = settings.column_min_width if min_width is None else min_width
        self.padding = settings.column_padding if padding is None else padding

    def format(self, report: Report) -> str:
        # Largest types first; name keeps ties stable across runs
        ordered = sorted(report.stats.values(), key=lambda s: (-s.sum, s.name))
        logger.debug("Rendering pretty report", extra={"types": len(ordered)})

        meta = report.meta
        lines: list[str] = [
            f" ID\t{meta.id}",
            f" Size\t{meta.size}",
            f" Index\t{meta.index}",
            f" Term\t{meta.term}",
            f" Version\t{meta.version}",
            "",
            " Type\tCount\tSize\t",
            f" {SEPARATOR}\t{SEPARATOR}\t{SEPARATOR}\t",
        ]
        for s in ordered:
            lines.append(f" {s.name}\t{s.count}\t{byte_size(s.sum)}\t")
        lines.append(f" {SEPARATOR}\t{SEPARATOR}\t{SEPARATOR}\t")
        lines.append(f" Total\t\t{byte_size(report.offset)}\t")

        return align_columns("\n".join(lines), min_width=self.min_width, padding=self.padding)
