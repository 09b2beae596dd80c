from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InspectError(Exception):
    """A controlled, user-facing error.

    Use this for unsupported formats, unserializable reports, etc.
    """

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True, slots=True)
class UnsupportedFormatError(InspectError):
    """Format identifier outside the supported set."""

    fmt: str = ""


@dataclass(frozen=True, slots=True)
class SerializationError(InspectError):
    """The structured encoder rejected a value in the report."""

    cause: str = ""


@dataclass(frozen=True, slots=True)
class InvalidReportError(InspectError):
    """A report file whose structure or values cannot be rendered."""

    reason: str = ""
