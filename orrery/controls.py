#!/usr/bin/env python3
"""
Dear PyGui control panel: one Add/Remove button per primary body plus simulation controls.

Callbacks are queued by Dear PyGui (manual callback management) and run from the
application loop, so they never overlap a frame tick.
"""
import logging
from typing import Tuple

import dearpygui.dearpygui as dpg

from .registry import BodyRegistry, ToggleResult
from .simulator import OrbitSimulator

logger = logging.getLogger(__name__)

STATUS_COLOR = (180, 220, 180)
ERROR_COLOR = (255, 120, 120)


def toggle_label(registry: BodyRegistry, name: str) -> str:
    """Button text for ``name``: what pressing it will do."""
    return f"Remove {name}" if registry.is_active(name) else f"Add {name}"


def toggle_status(name: str, result: ToggleResult) -> Tuple[str, bool]:
    """Status line for a toggle outcome, and whether it is an error."""
    if result is ToggleResult.UNKNOWN_NAME:
        return f"Unknown body '{name}'.", True
    if result is ToggleResult.BLOCKED:
        return f"{name} needs its primary to be active.", True
    return f"{name}: {result.value}.", False


class ControlPanel:
    """
    Buttons bound to BodyRegistry.toggle, relabelled from BodyRegistry.is_active.
    """

    def __init__(self, registry: BodyRegistry, simulator: OrbitSimulator):
        self.registry = registry
        self.simulator = simulator
        self.status_msg_id = None
        self.pause_button_id = None
        self._buttons = {}

        self._build_ui()

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        dpg.create_viewport(title="Orrery - Controls", width=340, height=520)

        with dpg.window(label="Controls", width=320, height=500, pos=(10, 10), tag="main_window"):
            dpg.add_text("Bodies")
            for entry in self.registry.catalog.primaries():
                with dpg.group(horizontal=True):
                    self._buttons[entry.name] = dpg.add_button(
                        label=toggle_label(self.registry, entry.name),
                        width=160,
                        callback=lambda s, a, u: self.on_toggle(u),
                        user_data=entry.name,
                    )
                    dpg.add_button(label="Drop", callback=lambda s, a, u: self.on_remove(u), user_data=entry.name)

            dpg.add_separator()

            dpg.add_text("Simulation Controls")
            with dpg.group(horizontal=True):
                self.pause_button_id = dpg.add_button(label="Pause", callback=self.on_toggle_pause)
                dpg.add_button(label="Reset system", callback=self.on_reset)
                dpg.add_checkbox(label="Labels", default_value=self.simulator.show_labels,
                                 callback=lambda s, a, u: self.on_labels(a))
            self.status_msg_id = dpg.add_text("")

        with dpg.handler_registry():
            dpg.add_key_press_handler(key=dpg.mvKey_Spacebar, callback=self.on_toggle_pause)

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=STATUS_COLOR):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        self._set_status(msg, ERROR_COLOR)

    def refresh(self):
        """Relabel every body button from the registry state."""
        for name, button in self._buttons.items():
            dpg.configure_item(button, label=toggle_label(self.registry, name))
        dpg.configure_item(self.pause_button_id, label="Play" if self.simulator.paused else "Pause")

    def on_toggle(self, name: str):
        result = self.registry.toggle(name)
        self.refresh()
        msg, is_error = toggle_status(name, result)
        if is_error:
            self._set_error(msg)
        else:
            self._set_status(msg)

    def on_remove(self, name: str):
        if self.registry.remove(name):
            self._set_status(f"Dropped {name} from the system.")
        else:
            self._set_status(f"{name} is not in the system.")
        self.refresh()

    def on_reset(self):
        self.registry.initialize()
        self.refresh()
        self._set_status("System reset.")

    def on_toggle_pause(self):
        paused = self.simulator.toggle_pause()
        self.refresh()
        self._set_status("Simulation paused." if paused else "Simulation playing.")

    def on_labels(self, value):
        self.simulator.show_labels = bool(value)

    def run_callbacks(self):
        """Run the callbacks Dear PyGui queued since the last frame."""
        dpg.run_callbacks(dpg.get_callback_queue())

    def render_frame(self) -> bool:
        """Render one panel frame. Returns False once the panel window is closed."""
        if not dpg.is_dearpygui_running():
            return False
        dpg.render_dearpygui_frame()
        return True

    def close(self):
        dpg.destroy_context()
