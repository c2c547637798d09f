"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from orbitengine.events import Event
from orbitengine.timestep import Timestep


class Layer:
    """A unit that receives frame updates and events."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.frames = 0

    def on_attach(self) -> None:
        """Called when the layer is attached."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is detached."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame; counts the frames seen."""
        self.frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Ordered layers followed by overlays.

    A pushed layer goes in front of the layers already pushed; an overlay
    goes after everything. Iteration runs front to back.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(0, layer)

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` if present."""
        if layer in self._layers:
            self._layers.remove(layer)

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay`` if present."""
        if overlay in self._layers:
            self._layers.remove(overlay)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return layer in self._layers