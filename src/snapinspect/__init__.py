"""
snapinspect

Render snapshot inspection reports as aligned tables or indented JSON.

Distribution name = "snapshot-inspect", import package = "snapinspect".
"""

from __future__ import annotations

from .formatters import get_formatter, get_supported_formats
from .models import Report, SnapshotMeta, TypeStats
from .utils import byte_size

__all__ = [
    "Report",
    "SnapshotMeta",
    "TypeStats",
    "__version__",
    "byte_size",
    "get_formatter",
    "get_supported_formats",
]

__version__ = "0.1.0"
