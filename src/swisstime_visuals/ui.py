from datetime import datetime, timedelta
import time

import gradio as gr
import numpy as np
import PIL.Image
import pytz

from .distortion import water_distortion
from .maps import graticule_map
from .solar import compute_solar_position, subsolar_point
from .terminator import TerminatorOverlay
from .waves import WaveField

CSS = """
.gradio-container { background-color: #0b0f19 !important; color: #e5e7eb !important; }
#daynight_img, #ripple_img { background-color: #0b0f19 !important; border-radius: 8px; overflow: hidden; border: none !important; }

/* Keep the image fully opaque and sharp while generating */
.generating, .pending {
    opacity: 1 !important;
    filter: none !important;
    transition: none !important;
}
"""

MAP_WIDTH = 720


def create_ui():

    base_map = graticule_map(MAP_WIDTH)
    base_array = np.asarray(base_map)
    field = WaveField()
    clock_start = time.monotonic()
    pointer = {"id": 0}

    def sim_now():
        return time.monotonic() - clock_start

    def render_daynight(day_of_year, hour_utc, pixel_density, blur):
        overlay = TerminatorOverlay(pixel_density=pixel_density, blur_degrees=blur)
        year = datetime.now(pytz.utc).year
        when = pytz.utc.localize(datetime(year, 1, 1)) + timedelta(days=int(day_of_year) - 1, hours=hour_utc)

        position = compute_solar_position(when)
        lat, lon = subsolar_point(position)
        summary = (f"**{when:%Y-%m-%d %H:%M} UTC** · declination {position.declination_degrees:.2f}° · "
                   f"subsolar point {lat:.1f}°, {lon:.1f}°")
        return overlay.composite(base_map, when), summary

    def render_ripples():
        now = sim_now()
        field.cleanup(now)
        params = field.shader_uniforms(now)
        frame = water_distortion(base_array, params, now)
        return PIL.Image.fromarray(frame), f"Live waves: {params.num_waves}"

    def on_click(evt: gr.SelectData):
        # Each click is a separate touch, so it never trips the movement gate
        x, y = evt.index
        field.add_wave((float(x), float(y)), pointer["id"], sim_now())
        field.release_pointer(pointer["id"])
        pointer["id"] += 1
        return render_ripples()

    with gr.Blocks(title="SwissTime Visuals") as demo:

        gr.Markdown("# SwissTime Visuals")
        gr.Markdown("Day/night terminator and ripple effects for the world-time map.")

        with gr.Tab("Day / Night"):
            with gr.Row():
                with gr.Column(scale=1):
                    with gr.Group():
                        gr.Markdown("### ☀️ Instant")
                        day_slider = gr.Slider(minimum=1, maximum=365, value=80, step=1, label="Day of Year")
                        hour_slider = gr.Slider(minimum=0, maximum=24, value=12, step=0.1, label="Hour (UTC)")
                    with gr.Group():
                        gr.Markdown("### 🎚️ Shading")
                        density_slider = gr.Slider(minimum=30, maximum=360, value=180, step=10,
                                                   label="Pixel Density", info="Higher is finer and slower")
                        blur_slider = gr.Slider(minimum=0.5, maximum=12, value=4.0, step=0.5,
                                                label="Twilight Band (degrees)")
                with gr.Column(scale=2):
                    daynight_img = gr.Image(label="Day/Night Map", interactive=False, elem_id="daynight_img")
                    summary_md = gr.Markdown()

            inputs = [day_slider, hour_slider, density_slider, blur_slider]
            for input_comp in inputs:
                input_comp.change(fn=render_daynight, inputs=inputs, outputs=[daynight_img, summary_md],
                                  trigger_mode="always_last", show_progress="hidden")
            demo.load(fn=render_daynight, inputs=inputs, outputs=[daynight_img, summary_md],
                      show_progress="hidden")

        with gr.Tab("Ripples"):
            gr.Markdown("Click the map to drop a wave.")
            ripple_img = gr.Image(value=base_map, label="Water Effect", interactive=False, elem_id="ripple_img")
            status_md = gr.Markdown()
            ripple_img.select(fn=on_click, outputs=[ripple_img, status_md], show_progress="hidden")

            timer = gr.Timer(0.1)
            timer.tick(fn=render_ripples, outputs=[ripple_img, status_md], show_progress="hidden")

    return demo


if __name__ == "__main__":
    demo = create_ui()
    demo.launch(css=CSS)
