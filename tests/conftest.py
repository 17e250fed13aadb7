"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from almanac.convert import clock  # noqa: E402


@pytest.fixture(autouse=True)
def real_clock(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with an unpinned clock and no environment override."""
    monkeypatch.delenv("ALMANAC_TODAY", raising=False)
    clock.set_current_date(None)
    yield
    clock.set_current_date(None)


@pytest.fixture
def pinned_today() -> tuple[int, int, int]:
    """Pin today's date to 2002-11-10 (a Sunday) as (day, month, year)."""
    value = (10, 11, 2002)
    clock.set_current_date(value)
    return value
