"""
Time zone lookup and display names for the watch time-zone pickers.
"""
from dataclasses import dataclass
from datetime import datetime
import functools
import logging

import pytz

from swisstime_visuals import constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeZoneInfo:
    """A selectable time zone."""
    id: str
    display_name: str


def resolve_time_zone(identifier):
    """
    Look up a pytz zone, falling back to UTC for unknown identifiers.
    """
    try:
        return pytz.timezone(identifier)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown time zone %r, falling back to UTC", identifier)
        return pytz.utc


def format_utc_offset(offset):
    """Format a timedelta as UTC+HH:MM."""
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def time_zone_display_name(identifier, when=None):
    """
    Human-readable name using the zone's standard (non-DST) offset.

    Args:
        identifier: IANA zone identifier
        when: Instant at which the standard offset is evaluated (default now)

    Returns:
        str like "Europe/Paris (UTC+01:00)"; unknown identifiers are returned unchanged
    """
    if identifier not in pytz.all_timezones_set:
        return identifier
    zone = pytz.timezone(identifier)
    moment = when if when is not None else datetime.now(pytz.utc)
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    local = moment.astimezone(zone)
    standard = local.utcoffset() - local.dst()
    return f"{identifier.replace('_', ' ')} ({format_utc_offset(standard)})"


@functools.lru_cache(maxsize=1)
def all_time_zones():
    """
    Every known zone sorted by display name, one entry per display name.
    """
    infos = sorted(
        (TimeZoneInfo(id=tz_id, display_name=time_zone_display_name(tz_id))
         for tz_id in pytz.common_timezones),
        key=lambda info: info.display_name,
    )
    seen = set()
    unique = []
    for info in infos:
        if info.display_name in seen:
            continue
        seen.add(info.display_name)
        unique.append(info)
    return tuple(unique)


def popular_time_zones():
    """Quick-pick zones for the picker header."""
    return [TimeZoneInfo(id=tz_id, display_name=time_zone_display_name(tz_id))
            for tz_id in constants.POPULAR_TIME_ZONES
            if tz_id in pytz.all_timezones_set]
