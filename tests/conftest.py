from __future__ import annotations

import logging

import pytest

import snapinspect.logging as snap_logging


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch):
    """Let every test install handlers on its own captured streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(snap_logging, "_CONFIGURED", False)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
