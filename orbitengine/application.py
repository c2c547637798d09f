"""The application: owns the window and layers and runs the frame loop."""

from __future__ import annotations

import time
from typing import Callable, ClassVar

from orbitengine import renderer as render
from orbitengine.events import Event, EventDispatcher, WindowCloseEvent
from orbitengine.input import Input
from orbitengine.layers import Layer, LayerStack
from orbitengine.renderer import Renderer
from orbitengine.timestep import Timestep
from orbitengine.window import Window


class Application:
    """Runs frames until the window is closed; subclasses override ``update``."""

    _current: ClassVar[Application | None] = None

    def __init__(
        self,
        window: Window,
        renderer: Renderer | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.window = window
        self.running = True
        self.frames = 0
        self.layers = LayerStack()
        self._clock = clock if clock is not None else time.perf_counter
        self._start = self._clock()
        self._last_frame_time = 0.0
        self.window.set_event_callback(self.on_event)
        self.push_layer(Input())
        if renderer is not None:
            render.install(renderer)
        self.renderer = render.get_renderer()
        Application._current = self

    def run(self) -> None:
        """Run frames until the application stops, then destroy it."""
        while self.running:
            self.step()
        self.destroy()

    def step(self) -> Timestep:
        """Run one frame and return its time step."""
        render.update()
        now = self._clock() - self._start
        timestep = Timestep(now - self._last_frame_time)
        self._last_frame_time = now
        for layer in self.layers:
            layer.on_update(timestep)
        self.update()
        self.window.on_update()
        return timestep

    def update(self) -> None:
        """Per-frame hook for subclasses; counts the frames run."""
        self.frames += 1

    def destroy(self) -> None:
        """Called once after the loop ends; detaches every layer."""
        self.running = False
        for layer in self.layers:
            layer.on_detach()

    def on_event(self, event: Event) -> None:
        """Handle window close, then offer the event to layers from the top down."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(self.layers):
            layer.on_event(event)
            if event.handled:
                break

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self.running = False
        return True

    def push_layer(self, layer: Layer) -> None:
        self.layers.push_layer(layer)

    def push_overlay(self, layer: Layer) -> None:
        self.layers.push_overlay(layer)

    @classmethod
    def current(cls) -> Application | None:
        """The most recently created application."""
        return Application._current