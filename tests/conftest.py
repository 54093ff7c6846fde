"""Pytest configuration shared by unit and integration tests."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

FROZEN_TODAY = date(2024, 3, 14)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def frozen_clock():
    """Clock frozen at 2024-03-14 UTC, so tomorrow is 2024-03-15."""
    from core.clock import FixedClock

    return FixedClock(FROZEN_TODAY)
