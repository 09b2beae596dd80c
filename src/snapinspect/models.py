"""Snapshot report data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidReportError

_META_KEYS = ("ID", "Size", "Index", "Term", "Version")


@dataclass(frozen=True)
class SnapshotMeta:
    """Identifying fields of a stored snapshot."""

    id: str
    size: int
    index: int
    term: int
    version: int


@dataclass(frozen=True)
class TypeStats:
    """Record count and cumulative size for one record type."""

    name: str
    count: int
    sum: int


@dataclass(frozen=True)
class Report:
    """Inspection report handed to the formatters.

    ``offset`` is the total number of bytes consumed while reading the
    snapshot. It is reported as the "Total" and is independent of
    ``meta.size``, the size the snapshot declares for itself.
    """

    meta: SnapshotMeta
    stats: dict[str, TypeStats] = field(default_factory=dict)
    offset: int = 0

    def to_dict(self, *, sort_stats: bool = True) -> dict[str, Any]:
        """Structured form, with the metadata fields hoisted to the top level."""
        names = sorted(self.stats) if sort_stats else list(self.stats)
        return {
            "ID": self.meta.id,
            "Size": self.meta.size,
            "Index": self.meta.index,
            "Term": self.meta.term,
            "Version": self.meta.version,
            "Stats": {
                name: {
                    "Name": self.stats[name].name,
                    "Sum": self.stats[name].sum,
                    "Count": self.stats[name].count,
                }
                for name in names
            },
            "Offset": self.offset,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Report:
        """Rebuild a report from its structured form (see :meth:`to_dict`)."""
        if not isinstance(data, Mapping):
            raise _invalid(f"expected an object, got {type(data).__name__}")

        missing = [key for key in (*_META_KEYS, "Offset") if key not in data]
        if missing:
            raise _invalid(f"missing keys: {', '.join(missing)}")

        raw_stats = data.get("Stats") or {}
        if not isinstance(raw_stats, Mapping):
            raise _invalid("'Stats' must be an object")

        stats: dict[str, TypeStats] = {}
        for name, entry in raw_stats.items():
            if not isinstance(entry, Mapping):
                raise _invalid(f"stats entry {name!r} must be an object")
            label = f"stats entry {name!r}"
            type_name = entry.get("Name", name)
            if not isinstance(type_name, str):
                raise _invalid(f"{label}: 'Name' must be a string")
            stats[name] = TypeStats(
                name=type_name,
                count=_get_count(entry, "Count", label),
                sum=_get_count(entry, "Sum", label),
            )

        if not isinstance(data["ID"], str):
            raise _invalid("'ID' must be a string")

        return cls(
            meta=SnapshotMeta(
                id=data["ID"],
                size=_get_int(data, "Size"),
                index=_get_int(data, "Index"),
                term=_get_int(data, "Term"),
                version=_get_int(data, "Version"),
            ),
            stats=stats,
            offset=_get_count(data, "Offset"),
        )


def _get_int(data: Mapping[str, Any], key: str, where: str = "report") -> int:
    if key not in data:
        raise _invalid(f"{where}: missing '{key}'")
    value = data[key]
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(f"{where}: '{key}' must be an integer, got {value!r}")
    return value


def _get_count(data: Mapping[str, Any], key: str, where: str = "report") -> int:
    value = _get_int(data, key, where)
    if value < 0:
        raise _invalid(f"{where}: '{key}' must be non-negative, got {value}")
    return value


def _invalid(reason: str) -> InvalidReportError:
    return InvalidReportError(
        code="invalid_report",
        message=f"Invalid report: {reason}",
        reason=reason,
    )
