"""
CPU evaluation of the water-distortion shader.

The shader receives a fixed-arity block of wave uniforms and displaces each
pixel's sample position radially around every live wave's travelling ring.
This module evaluates the same displacement with NumPy so frames can be
rendered without a GPU (previews, the Gradio viewer, tests).
"""
import numpy as np

from swisstime_visuals import constants


def displacement_field(shape, params, time_sec):
    """
    Per-pixel sample offsets produced by the wave uniforms.

    Args:
        shape: (height, width) of the target image
        params: WaveShaderParams for the frame
        time_sec: Simulation-clock seconds

    Returns:
        tuple: (dx, dy) float arrays of shape (height, width)
    """
    height, width = shape[:2]
    py, px = np.mgrid[0:height, 0:width].astype(float)
    dx = np.zeros((height, width))
    dy = np.zeros((height, width))

    for slot in params.waves[:params.num_waves]:
        if slot.amplitude < params.min_amplitude_threshold:
            continue
        elapsed = time_sec - slot.start_time
        if elapsed < 0.0 or slot.frequency <= 0.0:
            continue

        ox, oy = slot.origin
        rx = px - ox
        ry = py - oy
        dist = np.hypot(rx, ry)

        # Ring travelling outward; envelope keeps the disturbance near the front
        radius = slot.speed * elapsed
        wavelength = slot.speed / slot.frequency
        phase = (dist - radius) / wavelength
        strength = slot.amplitude * np.sin(2.0 * np.pi * phase) * np.exp(-phase**2)

        safe = np.maximum(dist, 1e-6)
        dx += strength * rx / safe
        dy += strength * ry / safe

    return dx, dy


def water_distortion(image, params, time_sec, max_sample_offset=None):
    """
    Apply the ripple distortion to an image.

    Args:
        image: (H, W) or (H, W, C) array
        params: WaveShaderParams for the frame
        time_sec: Simulation-clock seconds
        max_sample_offset: Clamp for the per-pixel offset (pixels)

    Returns:
        Distorted array with the same shape and dtype as `image`
    """
    image = np.asarray(image)
    if image.ndim not in (2, 3):
        raise ValueError(f"image must be (H, W) or (H, W, C), got shape {image.shape}")

    if params.num_waves == 0:
        return image.copy()

    limit = max_sample_offset if max_sample_offset is not None else constants.MAX_SAMPLE_OFFSET
    height, width = image.shape[:2]
    dx, dy = displacement_field((height, width), params, time_sec)
    dx = np.clip(dx, -limit, limit)
    dy = np.clip(dy, -limit, limit)

    py, px = np.mgrid[0:height, 0:width]
    src_x = np.clip(np.rint(px - dx), 0, width - 1).astype(np.intp)
    src_y = np.clip(np.rint(py - dy), 0, height - 1).astype(np.intp)
    return image[src_y, src_x]
