"""
Design constants and tuning parameters for the SwissTime visual-physics core.
"""

# Angles
DEGREES_PER_HOUR = 15.0
HOURS_PER_DAY = 24.0

# Solar ephemeris (low precision, epoch 2000 Jan 0.0 UT)
J2000_DAY_OFFSET = 730530
PERIHELION_LONGITUDE_DEG = 282.9404
PERIHELION_RATE_DEG_PER_DAY = 4.70935e-5
ECCENTRICITY = 0.016709
ECCENTRICITY_RATE_PER_DAY = -1.151e-9
MEAN_ANOMALY_DEG = 356.0470
MEAN_ANOMALY_RATE_DEG_PER_DAY = 0.9856002585
OBLIQUITY_DEG = 23.4393
OBLIQUITY_RATE_DEG_PER_DAY = -3.563e-7

# Time basis for the ephemeris. The historical overlay used America/New_York.
DEFAULT_REFERENCE_ZONE = "UTC"

# Day/night overlay
NIGHT_MAX_ALPHA = 0.42
TERMINATOR_BLUR_DEGREES = 4.0
PIXEL_DENSITY = 180.0
MAP_X_OFFSET_FRACTION = 0.16 # Meridian alignment of the world map artwork
MIN_PAINT_ALPHA = 0.01
NIGHT_OVERLAY_COLOR = (20, 24, 58)

# Ripple field
MAX_WAVES = 5
WAVE_DAMPING = 0.55 # Per-second amplitude multiplier
WAVE_INITIAL_AMPLITUDE = 80.0
WAVE_FREQUENCY = 3.0
WAVE_SPEED = 400.0
WAVE_MIN_AMPLITUDE_TO_REMOVE = 0.3
WAVE_MIN_AMPLITUDE_FOR_SHADER = 2.0
EMISSION_COOLDOWN_SECONDS = 0.05
EMISSION_MIN_DISTANCE = 15.0

# Water distortion (pixels)
MAX_SAMPLE_OFFSET = 120.0

# Base map colors
OCEAN_COLOR = (28, 62, 104)
GRATICULE_COLOR = (70, 110, 160)
EQUATOR_COLOR = (150, 180, 210)

# Quick-pick time zones
POPULAR_TIME_ZONES = [
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Europe/Rome",
    "Asia/Tokyo",
    "Asia/Shanghai",
    "Asia/Kolkata",
    "Australia/Sydney",
]
