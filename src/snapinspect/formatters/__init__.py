"""Report formatters."""

from __future__ import annotations

import logging

from ..errors import UnsupportedFormatError
from .base import BaseFormatter
from .json_fmt import JsonFormatter
from .pretty import PrettyFormatter

__all__ = [
    "JSON_FORMAT",
    "PRETTY_FORMAT",
    "BaseFormatter",
    "JsonFormatter",
    "PrettyFormatter",
    "get_formatter",
    "get_supported_formats",
]

logger = logging.getLogger(__name__)

PRETTY_FORMAT = "pretty"
JSON_FORMAT = "json"

# Closed set, in presentation order
_FORMATTERS: dict[str, type[BaseFormatter]] = {
    PRETTY_FORMAT: PrettyFormatter,
    JSON_FORMAT: JsonFormatter,
}


def get_supported_formats() -> list[str]:
    """Names accepted by :func:`get_formatter`, tabular first."""
    return list(_FORMATTERS)


def get_formatter(fmt: str) -> BaseFormatter:
    """Get formatter by name."""
    if fmt not in _FORMATTERS:
        logger.info("Rejected output format", extra={"output_format": fmt})
        raise UnsupportedFormatError(
            code="unsupported_format",
            message=f"Unknown format: {fmt}. Available: {', '.join(_FORMATTERS)}",
            fmt=fmt,
        )

    return _FORMATTERS[fmt]()
