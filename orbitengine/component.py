"""Base classes for components attached to objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orbitengine.events import Event
from orbitengine.layers import Layer
from orbitengine.timestep import Timestep


class Component:
    """Something an object owns and updates every frame."""

    def set_parent(self, parent: Component | None) -> None:
        """Attach to the owner's transform; the base component ignores it."""

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame by the owning object."""


class ComponentLayer(Layer, ABC):
    """A layer whose behaviour is supplied by component code."""

    def __init__(self) -> None:
        super().__init__("Component Layer")

    @abstractmethod
    def on_update(self, ts: Timestep) -> None:
        """Called once per frame."""

    @abstractmethod
    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer."""