import time
import dearpygui.dearpygui as dpg


def _make_callbacks(shared):
    def iters_cb(sender, app_data, user_data):
        shared['relaxation_iterations'] = int(app_data)
    def threshold_cb(sender, app_data, user_data):
        shared['prune_threshold'] = float(app_data)
    def interval_cb(sender, app_data, user_data):
        shared['prune_interval'] = int(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def prune_cb():
        shared['prune_now'] = True
    def reset_cb():
        shared['reset_world'] = True
    def exit_cb():
        shared['__exit__'] = True
    return iters_cb, threshold_cb, interval_cb, pause_cb, prune_cb, reset_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict.
    """
    dpg.create_context()

    iters_cb, threshold_cb, interval_cb, pause_cb, prune_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Sculpt Controls", tag="controls_window", width=380, height=320):
        dpg.add_text("Solver")
        dpg.add_slider_int(label="Relaxation passes", tag="iters_slider",
                           default_value=int(shared.get('relaxation_iterations', 40)),
                           min_value=1, max_value=300, callback=iters_cb)
        dpg.add_separator()
        dpg.add_text("Pruning")
        dpg.add_slider_float(label="Threshold", tag="threshold_slider",
                             default_value=float(shared.get('prune_threshold', 0.003)),
                             min_value=0.0, max_value=0.2, format="%.4f", callback=threshold_cb)
        dpg.add_slider_int(label="Every N frames", tag="interval_slider",
                           default_value=int(shared.get('prune_interval', 50)),
                           min_value=1, max_value=500, callback=interval_cb)
        dpg.add_separator()
        with dpg.group(horizontal=True):
            dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
            dpg.add_button(label="Prune Now", callback=lambda s, a, u: prune_cb())
        with dpg.group(horizontal=True):
            dpg.add_button(label="Reset Block", callback=lambda s, a, u: reset_cb())
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Sculpt Controls', width=400, height=360)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            dpg.set_value("status_text", str(shared.get('status', '')))
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
