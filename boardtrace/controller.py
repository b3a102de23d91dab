"""Controller and headless view driving a window model frame by frame."""

from __future__ import annotations

import time
from enum import IntEnum

from .window_model import WindowModel


class TouchEvent(IntEnum):
    """Kinds of pointer events delivered to the controller."""

    L_CLICK = 1


class WindowView:
    """A view that runs the frame loop a fixed number of times without a screen.

    Each frame calls update, begin_render, render and end_render on the
    controller and records the frame rate in ``title``.
    """

    def __init__(self, frames: int = 1) -> None:
        if frames < 1:
            raise ValueError(f"frame count must be positive, got {frames}")
        self.frames = frames
        self.controller: WindowController | None = None
        self.title = ""
        self.last_frame: bytes | None = None

    def create(self, controller: "WindowController") -> None:
        """Attach the controller and run the frame loop."""
        self.controller = controller
        for _ in range(self.frames):
            start = time.perf_counter()
            controller.update()
            controller.begin_render()
            controller.render()
            controller.end_render()
            microseconds = int((time.perf_counter() - start) * 1_000_000)
            fps = 1_000_000 / microseconds if microseconds else 0.0
            self.title = f"fps: {int(fps)}"

    def write_render(self, model: WindowModel) -> None:
        """Take the model's window buffer as the displayed frame."""
        self.last_frame = model.window_frame_buffer.to_bytes()


class WindowController:
    """Connects a window model with the view that shows it."""

    def __init__(self, model: WindowModel, view: WindowView) -> None:
        self.model = model
        self.view = view
        self.updates = 0
        self.render_started: float | None = None
        self.touch_events: list[tuple[TouchEvent, int, int]] = []

    def start(self) -> bool:
        """Hand control to the view; returns True once it finishes."""
        self.view.create(self)
        return True

    def end(self) -> None:
        """Finish control; the view is detached from this controller."""
        if self.view.controller is self:
            self.view.controller = None

    def update(self) -> None:
        """Per-frame update; counts frames by default."""
        self.updates += 1

    def begin_render(self) -> None:
        """Mark the moment rendering of the current frame begins."""
        self.render_started = time.perf_counter()

    def render(self) -> None:
        """Let the model refresh its drawing data."""
        self.model.update_render()

    def end_render(self) -> None:
        """Show the model's drawing in the view."""
        self.view.write_render(self.model)

    def on_touch_event(self, event: TouchEvent, x: int, y: int) -> None:
        """Record a pointer event at window position (x, y)."""
        self.touch_events.append((TouchEvent(event), x, y))