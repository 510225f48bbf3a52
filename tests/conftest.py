"""Pytest configuration and fixtures for krscore tests.

NOTE: sys.path manipulation removed to prevent import conflicts.
The installed package (``pip install -e .[test]``) resolves ``krscore``.
"""

import logging
import sys
from pathlib import Path

import pytest
import structlog

from krscore.config.settings import reset_settings
from krscore.core.scoring import KRScorer

# Ensure project root is NOT in sys.path to avoid module shadowing
project_root = str(Path(__file__).parent.parent)
while project_root in sys.path:
    sys.path.remove(project_root)
while "." in sys.path:
    sys.path.remove(".")
while "" in sys.path:
    sys.path.remove("")


@pytest.fixture
def scorer() -> KRScorer:
    return KRScorer()


@pytest.fixture(autouse=True)
def _isolate_logging_and_settings():
    """Undo configure_logging() and cached settings between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers = [
        h for h in root.handlers if not isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    root.setLevel(level)
    reset_settings()
