import os
from datetime import datetime, timedelta

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
import pytz

from swisstime_visuals.solar import compute_solar_position, solar_altitude_degrees, subsolar_point
from swisstime_visuals.terminator import night_alpha


def terminator_curve(position, num_points=361):
    """
    Latitude of the terminator (altitude = 0) for each longitude.

    Solves tan(lat) = -cos(HA) / tan(decl) per meridian; returns None near the equinox,
    where the terminator runs pole to pole and the relation degenerates.
    """
    decl = np.deg2rad(position.declination_degrees)
    if abs(decl) < 1e-4:
        return None
    lons = np.linspace(-180.0, 180.0, num_points)
    sidereal = position.greenwich_sidereal_time_hours + position.hour_of_day_decimal + lons / 15.0
    ha = np.deg2rad(((sidereal - position.right_ascension_hours) % 24.0) * 15.0)
    lats = np.rad2deg(np.arctan(-np.cos(ha) / np.tan(decl)))
    return lons, lats


def create_visualization(start=None, hours=24, step_minutes=30):
    start = start or pytz.utc.localize(datetime(2024, 6, 21))

    lons = np.linspace(-180.0, 180.0, 360)
    lats = np.linspace(90.0, -90.0, 180)
    lon_grid, lat_grid = np.meshgrid(lons, lats)

    fig, ax = plt.subplots(figsize=(12, 6))
    frames = int(hours * 60 / step_minutes)

    def update(frame):
        ax.clear()
        when = start + timedelta(minutes=frame * step_minutes)
        position = compute_solar_position(when)

        alpha = night_alpha(solar_altitude_degrees(lat_grid, lon_grid, position))
        ax.imshow(alpha, extent=(-180, 180, -90, 90), cmap='Blues', vmin=0.0, vmax=0.42)

        curve = terminator_curve(position)
        if curve is not None:
            ax.plot(curve[0], curve[1], color='orange', linewidth=1.5, label='Terminator')

        sub_lat, sub_lon = subsolar_point(position)
        ax.plot(sub_lon, sub_lat, marker='o', color='yellow', markersize=10, label='Subsolar point')

        ax.set_xlim(-180, 180)
        ax.set_ylim(-90, 90)
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')
        ax.set_title(f"Night shading {when:%Y-%m-%d %H:%M} UTC")
        ax.legend(loc='lower left')

    ani = animation.FuncAnimation(fig, update, frames=frames, interval=100)

    os.makedirs("output", exist_ok=True)
    print("Saving animation to output/animation_terminator.gif...")
    ani.save('output/animation_terminator.gif', writer='pillow', fps=10)
    print("Done.")


if __name__ == "__main__":
    create_visualization()
