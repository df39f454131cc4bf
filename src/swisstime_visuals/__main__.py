import argparse
from datetime import datetime
import logging
import os
import sys
import time

import numpy as np
import PIL.Image
import pytz

from swisstime_visuals import constants
from swisstime_visuals.distortion import water_distortion
from swisstime_visuals.maps import load_world_map
from swisstime_visuals.solar import compute_solar_position, solar_altitude_degrees, subsolar_point
from swisstime_visuals.terminator import TerminatorOverlay, night_alpha
from swisstime_visuals.waves import WaveField


def parse_when(text):
    """Parse 'YYYY-MM-DD HH:MM' (UTC) or return the current time."""
    if not text:
        return datetime.now(pytz.utc)
    return pytz.utc.localize(datetime.strptime(text, "%Y-%m-%d %H:%M"))


def generate_overlay(overlay, when, resolution=1024, map_path=None):
    """Write a day/night map for one instant."""
    print(f"\n--- Rendering Day/Night Map ({resolution}x{resolution // 2}) ---")
    os.makedirs("output", exist_ok=True)

    base = load_world_map(map_path, resolution)
    t0 = time.time()
    img = overlay.composite(base, when)
    print(f"  Complete in {time.time() - t0:.2f}s")

    filename = os.path.join("output", f"daynight_{when:%Y%m%d_%H%M}.png")
    img.save(filename)
    print(f"  Saved {filename}")


def generate_ripples(resolution=512, frames=24, fps=30.0, map_path=None):
    """Write a frame sequence from a scripted diagonal drag across the map."""
    print(f"\n--- Rendering Ripple Frames ({frames} frames) ---")
    os.makedirs("output", exist_ok=True)

    base = np.asarray(load_world_map(map_path, resolution))
    height, width = base.shape[:2]
    field = WaveField()

    for i in range(frames):
        now = i / fps
        # Drag for the first half of the sequence, then let the rings settle
        if i < frames // 2:
            frac = i / max(frames // 2 - 1, 1)
            field.add_wave((width * (0.2 + 0.6 * frac), height * (0.3 + 0.4 * frac)), 0, now)
        field.cleanup(now)
        params = field.shader_uniforms(now)
        frame = water_distortion(base, params, now)
        PIL.Image.fromarray(frame).save(os.path.join("output", f"ripple_{i:03d}.png"))

    print(f"  Saved {frames} frames to output/")


def run_physical_verification(when, reference_zone=None):
    """Run solar consistency checks."""
    print("\n--- Solar Verification ---")
    position = compute_solar_position(when, reference_zone)
    print(f"Instant: {when:%Y-%m-%d %H:%M} UTC (reference zone {reference_zone or constants.DEFAULT_REFERENCE_ZONE})")
    print(f"Right ascension: {position.right_ascension_hours:.4f} h")
    print(f"Declination:     {position.declination_degrees:.4f} deg")

    lat, lon = subsolar_point(position)
    print(f"Subsolar point:  lat {lat:.2f}, lon {lon:.2f}")

    zenith = solar_altitude_degrees(lat, lon, position)
    antipode = solar_altitude_degrees(-lat, lon + 180.0, position)
    print(f"Altitude at subsolar point: {zenith:.3f} deg (Target: 90)")
    print(f"Altitude at antipode:       {antipode:.3f} deg (Target: -90)")

    if abs(zenith - 90.0) < 0.1 and abs(antipode + 90.0) < 0.1:
        print("Verified: terminator geometry is consistent.")
    else:
        print("Error: subsolar geometry is inconsistent.")

    alpha = night_alpha(antipode)
    print(f"Night alpha at antipode: {alpha:.2f} (Target: {constants.NIGHT_MAX_ALPHA})")


def main():
    parser = argparse.ArgumentParser(description="SwissTime Visuals CLI")
    parser.add_argument("--ui", action="store_true", help="Launch the interactive Gradio UI")
    parser.add_argument("--overlay", action="store_true", help="Render the day/night world map")
    parser.add_argument("--ripples", action="store_true", help="Render a ripple distortion frame sequence")
    parser.add_argument("--verify", action="store_true", help="Run solar consistency checks")
    parser.add_argument("--when", type=str, default=None, help="UTC instant 'YYYY-MM-DD HH:MM' (default now)")
    parser.add_argument("--res", type=int, default=1024, help="Map width in pixels")
    parser.add_argument("--map", type=str, default=None, help="Equirectangular map artwork to shade")
    parser.add_argument("--reference-zone", type=str, default=None,
                        help="Civil time basis for the ephemeris (default UTC)")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    when = parse_when(args.when)

    if args.ui:
        from swisstime_visuals.ui import CSS, create_ui

        print("Launching UI...")
        demo = create_ui()
        demo.launch(css=CSS)
    elif args.overlay:
        overlay = TerminatorOverlay(reference_zone=args.reference_zone)
        generate_overlay(overlay, when, args.res, args.map)
    elif args.ripples:
        generate_ripples(args.res, map_path=args.map)
    elif args.verify:
        run_physical_verification(when, args.reference_zone)
    else:
        parser.print_help()


def run_ui():
    """Entry point for swisstime-ui command."""
    sys.argv = [sys.argv[0], "--ui"]
    main()


def run_verify():
    """Entry point for swisstime-verify command."""
    sys.argv = [sys.argv[0], "--verify"]
    main()


def run_overlay():
    """Entry point for swisstime-overlay command."""
    sys.argv = [sys.argv[0], "--overlay"]
    main()


if __name__ == "__main__":
    main()
