"""
Approximate solar ephemeris for the day/night terminator.

This module computes the sun's equatorial position for an instant using the
low-precision orbital-element formulas (single eccentric anomaly correction,
accurate to a fraction of a degree) and the local solar altitude for any
latitude/longitude. Altitude evaluation is vectorized so an entire map grid
is shaded from one SolarPosition.
"""
from dataclasses import dataclass

import numpy as np

from swisstime_visuals import constants
from swisstime_visuals.utils import scalar_compatible, to_zone


@dataclass(frozen=True)
class SolarPosition:
    """
    Sun position for one instant.

    Attributes:
        right_ascension_hours: Right ascension in [0, 24)
        declination_degrees: Declination, bounded by the obliquity
        greenwich_sidereal_time_hours: GMST0 baseline derived from the sun's mean longitude
        hour_of_day_decimal: Fractional hour of day in the reference zone
    """
    right_ascension_hours: float
    declination_degrees: float
    greenwich_sidereal_time_hours: float
    hour_of_day_decimal: float


def rev(angle):
    """Normalize an angle (degrees) into [0, 360). Works on scalars and arrays."""
    return angle % 360.0


def normalize_hours(hours):
    """Normalize an hour value into [0, 24). Works on scalars and arrays."""
    return hours % constants.HOURS_PER_DAY


def days_since_j2000(year, month, day, hour_decimal):
    """
    Days since the ephemeris epoch (2000 Jan 0.0), including the day fraction.

    Integer day arithmetic, valid for the Gregorian years 1900-2100.
    """
    whole_days = (367 * year - 7 * (year + (month + 9) // 12) // 4
                  + 275 * month // 9 + day - constants.J2000_DAY_OFFSET)
    return whole_days + hour_decimal / constants.HOURS_PER_DAY


def compute_solar_position(instant, reference_zone=None):
    """
    Compute the sun's right ascension, declination and sidereal baseline.

    Args:
        instant: Aware datetime, naive datetime (UTC) or POSIX seconds
        reference_zone: IANA zone used as the civil time basis (default UTC)

    Returns:
        SolarPosition
    """
    zone = reference_zone or constants.DEFAULT_REFERENCE_ZONE
    local = to_zone(instant, zone)

    hour_decimal = local.hour + local.minute / 60.0 + local.second / 3600.0
    d = days_since_j2000(local.year, local.month, local.day, hour_decimal)

    # Orbital elements
    w = constants.PERIHELION_LONGITUDE_DEG + constants.PERIHELION_RATE_DEG_PER_DAY * d
    e = constants.ECCENTRICITY + constants.ECCENTRICITY_RATE_PER_DAY * d
    M = rev(constants.MEAN_ANOMALY_DEG + constants.MEAN_ANOMALY_RATE_DEG_PER_DAY * d)
    oblecl = constants.OBLIQUITY_DEG + constants.OBLIQUITY_RATE_DEG_PER_DAY * d
    L = rev(w + M)

    # One first-order correction, not an iterative Kepler solve
    M_rad = np.deg2rad(M)
    E = M + np.rad2deg(e * np.sin(M_rad) * (1.0 + e * np.cos(M_rad)))
    E_rad = np.deg2rad(E)

    # Position in the orbital plane
    x = np.cos(E_rad) - e
    y = np.sin(E_rad) * np.sqrt(1.0 - e * e)
    r = np.hypot(x, y)
    v = np.rad2deg(np.arctan2(y, x))
    sun_longitude = np.deg2rad(rev(v + w))

    # Ecliptic -> equatorial rotation about the x axis
    obl_rad = np.deg2rad(oblecl)
    x_eclip = r * np.cos(sun_longitude)
    y_eclip = r * np.sin(sun_longitude)
    x_equat = x_eclip
    y_equat = y_eclip * np.cos(obl_rad)
    z_equat = y_eclip * np.sin(obl_rad)

    ra = normalize_hours(np.rad2deg(np.arctan2(y_equat, x_equat)) / constants.DEGREES_PER_HOUR)
    decl = np.rad2deg(np.arcsin(z_equat / r))
    gmst0 = (L + 180.0) / constants.DEGREES_PER_HOUR

    return SolarPosition(
        right_ascension_hours=float(ra),
        declination_degrees=float(decl),
        greenwich_sidereal_time_hours=float(gmst0),
        hour_of_day_decimal=float(hour_decimal),
    )


@scalar_compatible
def solar_altitude_degrees(latitude, longitude, position):
    """
    Altitude of the sun above the horizon at the given coordinates.

    Args:
        latitude: Latitude in degrees (scalar or array)
        longitude: Longitude in degrees (scalar or array)
        position: SolarPosition for the instant

    Returns:
        Signed altitude in degrees; positive means the sun is above the horizon
    """
    lat_rad = np.deg2rad(latitude)
    sidereal_time = (position.greenwich_sidereal_time_hours + position.hour_of_day_decimal
                     + longitude / constants.DEGREES_PER_HOUR)
    hour_angle = normalize_hours(sidereal_time - position.right_ascension_hours) * constants.DEGREES_PER_HOUR
    ha_rad = np.deg2rad(hour_angle)
    decl_rad = np.deg2rad(position.declination_degrees)

    # Equatorial unit vector, then rotate about the y axis by the co-latitude
    x = np.cos(ha_rad) * np.cos(decl_rad)
    y = np.sin(ha_rad) * np.cos(decl_rad)
    z = np.sin(decl_rad)
    x_hor = x * np.sin(lat_rad) - z * np.cos(lat_rad)
    y_hor = y
    z_hor = x * np.cos(lat_rad) + z * np.sin(lat_rad)

    return np.rad2deg(np.arctan2(z_hor, np.sqrt(x_hor**2 + y_hor**2)))


def subsolar_point(position):
    """
    Geographic point where the sun is at the zenith.

    Returns:
        (latitude, longitude) in degrees, longitude wrapped into [-180, 180)
    """
    hours = (position.right_ascension_hours - position.greenwich_sidereal_time_hours
             - position.hour_of_day_decimal)
    longitude = (hours * constants.DEGREES_PER_HOUR + 180.0) % 360.0 - 180.0
    return position.declination_degrees, float(longitude)
