"""Shared utility functions."""

from __future__ import annotations

import sys

KILOBYTE = 1 << 10
MEGABYTE = 1 << 20
GIGABYTE = 1 << 30
TERABYTE = 1 << 40

# Largest unit first
_UNITS: tuple[tuple[int, str], ...] = (
    (TERABYTE, "TB"),
    (GIGABYTE, "GB"),
    (MEGABYTE, "MB"),
    (KILOBYTE, "KB"),
)


def byte_size(n: int) -> str:
    """Convert a byte count to a short human-readable string.

    Uses binary (1024-based) units and at most one decimal digit:
    ``0 -> "0"``, ``512 -> "512B"``, ``1536 -> "1.5KB"``, ``1048576 -> "1MB"``.
    """
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    if n == 0:
        return "0"

    for threshold, unit in _UNITS:
        if n >= threshold:
            value = f"{n / threshold:.1f}"
            return value.removesuffix(".0") + unit

    return f"{n}B"


def output_text(data: str, output_file: str | None = None) -> None:
    """Write *data* to *output_file* (replacing it) or stdout."""
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(data + "\n")
    else:
        sys.stdout.write(data + "\n")
        sys.stdout.flush()
