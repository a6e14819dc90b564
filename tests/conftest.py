"""Shared pytest fixtures for TurboDocs tests."""

from datetime import datetime

import pytest

from turbodocs.core.ir.themeconfig import ThemeConfiguration
from turbodocs.theme import create_turbocore_config


def make_clock(year: int, month: int = 6, day: int = 1):
    """Return a clock fixed at the given date."""
    instant = datetime(year, month, day, 12, 0, 0)
    return lambda: instant


@pytest.fixture
def clock_2025():
    """Clock fixed in 2025."""
    return make_clock(2025)


@pytest.fixture
def turbocore_config(clock_2025) -> ThemeConfiguration:
    """TurboCore configuration evaluated in 2025."""
    return create_turbocore_config(clock=clock_2025)
