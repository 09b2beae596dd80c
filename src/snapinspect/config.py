from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in {"0", "false", "False"}


@dataclass(frozen=True, slots=True)
class Settings:
    default_format: str = field(default_factory=lambda: _get_str("SNAPINSPECT_FORMAT", "pretty"))
    log_level: str = field(default_factory=lambda: _get_str("LOG_LEVEL", "WARNING"))

    # Structured output
    json_indent: int = field(default_factory=lambda: _get_int("SNAPINSPECT_JSON_INDENT", 3))
    json_sort_stats: bool = field(
        default_factory=lambda: _get_bool("SNAPINSPECT_JSON_SORT_STATS", True)
    )

    # Tabular output column layout
    column_min_width: int = field(default_factory=lambda: _get_int("SNAPINSPECT_MIN_WIDTH", 8))
    column_padding: int = field(default_factory=lambda: _get_int("SNAPINSPECT_PADDING", 6))


settings = Settings()
