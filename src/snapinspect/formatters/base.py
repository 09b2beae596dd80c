"""Base formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Report


class BaseFormatter(ABC):
    """Abstract base class for report formatters.

    Formatters hold only their layout options, so one instance can render
    any number of reports, from any thread.
    """

    name: str

    @abstractmethod
    def format(self, report: Report) -> str:
        """Render *report* to a string."""
        ...
