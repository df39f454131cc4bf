"""
Clock-hand geometry and time formatting for the analog watch faces.
"""
from dataclasses import dataclass

from swisstime_visuals.timezones import resolve_time_zone
from swisstime_visuals.utils import to_zone


@dataclass(frozen=True)
class HandAngles:
    """Hand rotations in degrees, clockwise from 12 o'clock."""
    hour: float
    minute: float
    second: float


def _local(instant, zone):
    if isinstance(zone, str):
        zone = resolve_time_zone(zone)
    return to_zone(instant, zone)


def hand_angles(instant, zone="UTC"):
    """
    Hand angles for an instant shown in the given zone.

    The hour hand advances with the minute; minute and second hands tick.
    """
    local = _local(instant, zone)
    hour = local.hour % 12 * 30.0 + local.minute * 0.5
    return HandAngles(hour=hour, minute=local.minute * 6.0, second=local.second * 6.0)


def format_time(instant, zone="UTC", us_format=True):
    """'3:07:09 PM' in US format, '15:07:09' otherwise."""
    local = _local(instant, zone)
    if us_format:
        hour12 = local.hour % 12 or 12
        suffix = "AM" if local.hour < 12 else "PM"
        return f"{hour12}:{local.minute:02d}:{local.second:02d} {suffix}"
    return f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"


def format_date(instant, zone="UTC", us_format=True):
    """'October 19' in US format, '19 October' otherwise."""
    local = _local(instant, zone)
    month = local.strftime("%B")
    if us_format:
        return f"{month} {local.day}"
    return f"{local.day} {month}"
