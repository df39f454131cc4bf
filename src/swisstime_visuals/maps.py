"""
Base world-map images for the day/night overlay.
"""
import PIL.Image
import PIL.ImageDraw

from swisstime_visuals import constants


def graticule_map(width=720, height=None):
    """
    Plain equirectangular map: ocean fill with 30 degree graticule and the equator.

    Used when no map artwork is supplied.
    """
    height = height or width // 2
    img = PIL.Image.new("RGB", (width, height), constants.OCEAN_COLOR)
    draw = PIL.ImageDraw.Draw(img)

    for lon in range(-180, 181, 30):
        x = round((lon + 180.0) / 360.0 * (width - 1))
        draw.line([(x, 0), (x, height - 1)], fill=constants.GRATICULE_COLOR)
    for lat in range(-90, 91, 30):
        y = round((90.0 - lat) / 180.0 * (height - 1))
        color = constants.EQUATOR_COLOR if lat == 0 else constants.GRATICULE_COLOR
        draw.line([(0, y), (width - 1, y)], fill=color)
    return img


def load_world_map(path=None, width=720):
    """
    Load map artwork resized to a 2:1 aspect ratio, or a graticule map if no path is given.
    """
    if path is None:
        return graticule_map(width)
    img = PIL.Image.open(path).convert("RGB")
    return img.resize((width, width // 2), PIL.Image.Resampling.LANCZOS)
