from datetime import datetime

import pytest
import pytz

from swisstime_visuals import constants
from swisstime_visuals.clock import format_date, format_time, hand_angles
from swisstime_visuals.timezones import (
    all_time_zones,
    format_utc_offset,
    popular_time_zones,
    resolve_time_zone,
    time_zone_display_name,
)

WINTER = pytz.utc.localize(datetime(2025, 1, 15, 15, 7, 9))
SUMMER = pytz.utc.localize(datetime(2025, 7, 15, 15, 7, 9))


def test_hand_angles_utc():
    angles = hand_angles(WINTER)
    assert angles.hour == pytest.approx(3 * 30 + 7 * 0.5)
    assert angles.minute == pytest.approx(42.0)
    assert angles.second == pytest.approx(54.0)


def test_hand_angles_in_zone():
    """Tokyo is UTC+9: 15:07 UTC reads 00:07, so the hour hand sits just past 12."""
    angles = hand_angles(WINTER, "Asia/Tokyo")
    assert angles.hour == pytest.approx(3.5)
    assert angles.minute == pytest.approx(42.0)


def test_hand_angles_at_noon_and_midnight():
    noon = pytz.utc.localize(datetime(2025, 3, 1, 12, 0, 0))
    midnight = pytz.utc.localize(datetime(2025, 3, 1, 0, 0, 0))
    assert hand_angles(noon).hour == 0.0
    assert hand_angles(midnight).hour == 0.0


def test_time_formats():
    assert format_time(WINTER, "UTC", us_format=True) == "3:07:09 PM"
    assert format_time(WINTER, "UTC", us_format=False) == "15:07:09"
    assert format_time(WINTER, "Asia/Tokyo", us_format=True) == "12:07:09 AM"
    assert format_time(SUMMER, "America/New_York", us_format=False) == "11:07:09"


def test_date_formats():
    assert format_date(WINTER, "UTC", us_format=True) == "January 15"
    assert format_date(WINTER, "UTC", us_format=False) == "15 January"
    # Crossing midnight moves the date
    assert format_date(WINTER, "Pacific/Kiritimati", us_format=True) == "January 16"


def test_resolve_unknown_zone_falls_back_to_utc():
    assert resolve_time_zone("Mars/Olympus_Mons") is pytz.utc
    assert resolve_time_zone("Europe/Paris").zone == "Europe/Paris"


def test_utc_offset_format():
    assert format_utc_offset(pytz.timezone("Asia/Kolkata").utcoffset(datetime(2025, 1, 1))) == "UTC+05:30"
    assert format_utc_offset(pytz.timezone("America/St_Johns").utcoffset(datetime(2025, 1, 1))) == "UTC-03:30"


def test_display_name_uses_standard_offset():
    """Summer time does not change the displayed (standard) offset."""
    assert time_zone_display_name("Europe/Paris", WINTER) == "Europe/Paris (UTC+01:00)"
    assert time_zone_display_name("Europe/Paris", SUMMER) == "Europe/Paris (UTC+01:00)"
    assert time_zone_display_name("America/Los_Angeles", SUMMER) == "America/Los Angeles (UTC-08:00)"


def test_display_name_unknown_identifier():
    assert time_zone_display_name("Nowhere/Special") == "Nowhere/Special"


def test_all_time_zones_sorted_and_unique():
    zones = all_time_zones()
    names = [z.display_name for z in zones]
    assert names == sorted(names)
    assert len(names) == len(set(names))
    assert any(z.id == "Europe/Berlin" for z in zones)
    # Cached
    assert all_time_zones() is zones


def test_popular_time_zones():
    zones = popular_time_zones()
    assert [z.id for z in zones] == constants.POPULAR_TIME_ZONES
    assert len(zones) == 12


if __name__ == "__main__":
    pytest.main([__file__])
