"""
Day/night terminator shading and the map overlay rendering loop.

This module turns solar altitudes into night-shading opacity and paints a
coarse-grid RGBA overlay for an equirectangular world map.
"""
import functools
import logging

import numpy as np
import PIL.Image

from swisstime_visuals import constants
from swisstime_visuals.solar import compute_solar_position, solar_altitude_degrees
from swisstime_visuals.utils import instant_key, scalar_compatible

logger = logging.getLogger(__name__)


@scalar_compatible
def night_alpha(altitude, blur_band_degrees=constants.TERMINATOR_BLUR_DEGREES,
                max_alpha=constants.NIGHT_MAX_ALPHA):
    """
    Night-shading opacity for a solar altitude.

    Full opacity below -blur, transparent above +blur, linear in between so the
    terminator has a soft edge. A band of zero width gives a hard step with
    half opacity exactly on the horizon.

    Args:
        altitude: Solar altitude in degrees (scalar or array)
        blur_band_degrees: Half-width of the twilight band
        max_alpha: Opacity of full night

    Returns:
        Opacity in [0, max_alpha]
    """
    blur = float(blur_band_degrees)
    if blur <= 0.0:
        # No twilight band: hard step at the horizon
        return np.where(altitude < 0.0, max_alpha, np.where(altitude > 0.0, 0.0, 0.5 * max_alpha))
    t = (altitude + blur) / (2.0 * blur)
    band = max_alpha * (1.0 - t)
    return np.where(altitude < -blur, max_alpha, np.where(altitude > blur, 0.0, band))


class TerminatorOverlay:
    """
    Paints night shading over an equirectangular world map.
    """

    def __init__(self, pixel_density=None, blur_degrees=None, max_alpha=None,
                 x_offset_fraction=None, min_paint_alpha=None, color=None,
                 reference_zone=None):
        """
        Initialize overlay parameters.

        Args:
            pixel_density: Samples across the map width (larger = finer grid)
            blur_degrees: Half-width of the twilight band (degrees of altitude)
            max_alpha: Opacity of full night
            x_offset_fraction: Horizontal shift aligning the map's meridian
            min_paint_alpha: Cells at or below this opacity are left unpainted
            color: RGB tint of the night overlay
            reference_zone: Civil time basis for the ephemeris
        """
        self.pixel_density = pixel_density if pixel_density is not None else constants.PIXEL_DENSITY
        self.blur_degrees = blur_degrees if blur_degrees is not None else constants.TERMINATOR_BLUR_DEGREES
        self.max_alpha = max_alpha if max_alpha is not None else constants.NIGHT_MAX_ALPHA
        self.x_offset_fraction = (x_offset_fraction if x_offset_fraction is not None
                                  else constants.MAP_X_OFFSET_FRACTION)
        self.min_paint_alpha = min_paint_alpha if min_paint_alpha is not None else constants.MIN_PAINT_ALPHA
        self.color = tuple(color) if color is not None else constants.NIGHT_OVERLAY_COLOR
        self.reference_zone = reference_zone or constants.DEFAULT_REFERENCE_ZONE

    def step_size(self, width):
        """Grid cell edge in pixels."""
        return max(1, int(width / self.pixel_density))

    def sample_grid(self, width, height):
        """
        Cell origins and their geographic coordinates.

        Returns:
            tuple: (xs, ys, longitude, latitude) where xs/ys are 1D pixel origins and
            longitude/latitude are (len(ys), len(xs)) arrays
        """
        step = self.step_size(width)
        xs = np.arange(0, int(width), step)
        ys = np.arange(0, int(height), step)

        adjusted_x = xs + width * self.x_offset_fraction
        lon_row = adjusted_x / width * 360.0 - 180.0
        lat_col = 90.0 - ys / height * 180.0
        longitude, latitude = np.meshgrid(lon_row, lat_col)
        return xs, ys, longitude, latitude

    def alpha_grid(self, width, height, instant):
        """
        Night opacity for every grid cell.

        Returns:
            (len(ys), len(xs)) array of opacities
        """
        position = compute_solar_position(instant, self.reference_zone)
        _, _, longitude, latitude = self.sample_grid(width, height)
        altitude = solar_altitude_degrees(latitude, longitude, position)
        return night_alpha(altitude, self.blur_degrees, self.max_alpha)

    @functools.lru_cache(maxsize=32)
    def _render_cached(self, width, height, timestamp):
        """
        Internal cached render call using hashable arguments.
        """
        step = self.step_size(width)
        alpha = self.alpha_grid(width, height, timestamp)
        alpha = np.where(alpha > self.min_paint_alpha, alpha, 0.0)

        # Expand each cell to a step x step block, then crop the partial edge cells
        block = np.repeat(np.repeat(alpha, step, axis=0), step, axis=1)[:height, :width]

        rgba = np.zeros((height, width, 4), dtype=np.uint8)
        rgba[:, :, :3] = np.array(self.color, dtype=np.uint8)
        rgba[:, :, 3] = np.round(block * 255.0).astype(np.uint8)
        # Shared by every caller hitting the cache
        rgba.flags.writeable = False

        logger.debug("Rendered %dx%d terminator overlay (step=%d, night cells=%d)",
                     width, height, step, int(np.count_nonzero(alpha)))
        return rgba

    def render(self, width, height, instant):
        """
        Render the night overlay as an RGBA image.

        Args:
            width, height: Map size in pixels
            instant: Aware datetime, naive datetime (UTC) or POSIX seconds

        Returns:
            (height, width, 4) read-only uint8 array; copy it before modifying
        """
        return self._render_cached(int(width), int(height), instant_key(instant))

    def composite(self, base_map, instant):
        """
        Composite the night overlay onto a base map.

        Args:
            base_map: PIL image of the equirectangular world map
            instant: Instant to shade

        Returns:
            RGBA PIL image
        """
        base = base_map.convert("RGBA")
        overlay = PIL.Image.fromarray(self.render(base.width, base.height, instant))
        return PIL.Image.alpha_composite(base, overlay)
