"""Shared test fixtures for concordance scheme tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path so all tests can import from it
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


@pytest.fixture
def scheme():
    """Freshly constructed and validated concordance scheme."""
    from concordance import GenotypeConcordanceScheme

    return GenotypeConcordanceScheme()
