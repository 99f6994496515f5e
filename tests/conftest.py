"""Pytest configuration and shared fixtures for geotemporal tests.

Provides:
- Representative calendar instants (leap day, negative year, epoch)
- Environment isolation for settings overrides
- Root logger save/restore around CLI runs
"""

import logging
import os
from pathlib import Path

import pytest

from geotemporal.dates import CalendarInstant

# ============================================================================
# Calendar Instants
# ============================================================================


@pytest.fixture
def full_instant() -> CalendarInstant:
    """Instant with every field away from its zero point."""
    return CalendarInstant(year=2017, month=8, day=23, hour=14, minute=35, second=12, millisecond=789)


@pytest.fixture
def leap_day_instant() -> CalendarInstant:
    """29 February of a leap year, mid-day."""
    return CalendarInstant(year=2020, month=2, day=29, hour=12)


@pytest.fixture
def negative_year_instant() -> CalendarInstant:
    """Instant in a negative (BC-style) year."""
    return CalendarInstant(year=-99, month=3, day=15, hour=6, minute=30)


@pytest.fixture
def epoch_instant() -> CalendarInstant:
    """1970-01-01T00:00:00.000Z."""
    return CalendarInstant(year=1970)


# ============================================================================
# Environment & Logging Isolation
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every GEOTEMPORAL_* variable for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("GEOTEMPORAL_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def config_toml(tmp_path: Path) -> Path:
    """Write a valid settings file and return its path."""
    path = tmp_path / "geotemporal.toml"
    path.write_text(
        "[dates]\n"
        'delimiter = "/"\n'
        'range_separator = " to "\n'
        'default_resolution = "month"\n'
        "\n"
        "[logging]\n"
        'level = "info"\n',
        encoding="utf-8",
    )
    return path


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
    config.addinivalue_line("markers", "property: marks invariant tests over input grids")
    config.addinivalue_line("markers", "cli: marks command-line interface tests")
