import time
import dearpygui.dearpygui as dpg

def _make_callbacks(shared):
    def speed_cb(sender, app_data, user_data):
        shared['speed'] = float(app_data)
    def iters_cb(sender, app_data, user_data):
        shared['iterations'] = int(app_data)
    def bounce_cb(sender, app_data, user_data):
        shared['wall_bounciness'] = float(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_simulation'] = True
    def exit_cb():
        shared['__exit__'] = True
    return speed_cb, iters_cb, bounce_cb, pause_cb, reset_cb, exit_cb

def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict,
    which the simulation loop polls once per frame.
    """
    dpg.create_context()

    speed_cb, iters_cb, bounce_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Simulation Controls", tag="controls_window", width=360, height=240):
        dpg.add_text("Time")
        dpg.add_slider_float(label="Speed", tag="speed_slider", default_value=float(shared.get('speed', 1.0)),
                             min_value=0.0, max_value=10.0, callback=speed_cb)
        dpg.add_slider_int(label="Sub-steps", tag="iters_slider", default_value=int(shared.get('iterations', 1)),
                           min_value=1, max_value=20, callback=iters_cb)
        dpg.add_separator()
        dpg.add_text("Walls")
        dpg.add_slider_float(label="Bounciness", tag="bounce_slider",
                             default_value=float(shared.get('wall_bounciness', 0.25)),
                             min_value=0.0, max_value=1.0, callback=bounce_cb)
        dpg.add_separator()
        with dpg.group(horizontal=True):
            dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
            dpg.add_button(label="Reset", callback=lambda s, a, u: reset_cb())
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='N-Bodies Controls', width=380, height=280)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = f"particles={shared.get('particle_count', 0)}, paused={shared.get('paused', False)}"
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
