"""
Pytest fixtures and configuration for SwissTime Visuals tests.

This module provides shared fixtures and utilities to reduce test code duplication
and improve test organization.
"""

from datetime import datetime

import numpy as np
import pytest
import pytz

from swisstime_visuals.solar import SolarPosition
from swisstime_visuals.terminator import TerminatorOverlay
from swisstime_visuals.waves import WaveField


@pytest.fixture
def field():
    """Create a wave field with the standard design constants."""
    return WaveField()


@pytest.fixture
def overlay():
    """Create a standard terminator overlay."""
    return TerminatorOverlay()


@pytest.fixture
def instants():
    """Common instants (UTC) covering equinoxes and solstices."""
    return {
        'march_equinox_noon': pytz.utc.localize(datetime(2024, 3, 20, 12, 8)),
        'june_solstice': pytz.utc.localize(datetime(2024, 6, 20, 20, 51)),
        'september_equinox': pytz.utc.localize(datetime(2024, 9, 22, 12, 44)),
        'december_solstice': pytz.utc.localize(datetime(2024, 12, 21, 9, 21)),
    }


@pytest.fixture
def zenith_position():
    """Synthetic sun position with zero declination and zero hour angle at longitude 0."""
    return SolarPosition(
        right_ascension_hours=6.0,
        declination_degrees=0.0,
        greenwich_sidereal_time_hours=3.5,
        hour_of_day_decimal=2.5,
    )


def assert_alpha_in_range(alpha, max_alpha=0.42, err_msg=""):
    """Assert that all opacities are within [0, max_alpha]."""
    alpha = np.asarray(alpha)
    assert np.all(alpha >= 0.0), f"Alpha below 0: {alpha.min()} - {err_msg}"
    assert np.all(alpha <= max_alpha + 1e-12), f"Alpha above {max_alpha}: {alpha.max()} - {err_msg}"


def fill_field(field, origins_and_times):
    """Add one wave per (x, y, t) using a distinct pointer each, bypassing throttling."""
    for pointer_id, (x, y, t) in enumerate(origins_and_times):
        assert field.add_wave((x, y), pointer_id, t), f"Wave {pointer_id} was not accepted"
