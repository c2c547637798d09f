"""Scene objects: layers that own and update a list of components."""

from __future__ import annotations

from typing import Callable, TypeVar

from orbitengine.application import Application
from orbitengine.component import Component
from orbitengine.layers import Layer
from orbitengine.timestep import Timestep
from orbitengine.transform import Transform

C = TypeVar("C", bound=Component)
UpdateFn = Callable[[float, "Object"], None]


class Object(Layer):
    """A named object registered with the application; it always has a Transform."""

    def __init__(self, name: str = "New Object", application: Application | None = None) -> None:
        super().__init__(name)
        app = application if application is not None else Application.current()
        if app is None:
            raise RuntimeError("an object needs a running application")
        app.push_layer(self)
        self.active = True
        self.components: list[Component] = []
        self._update_fn: UpdateFn | None = None
        self.add_component(Transform())

    @property
    def transform(self) -> Transform:
        transform = self.get_component(Transform)
        assert transform is not None
        return transform

    def add_component(self, component: Component) -> None:
        """Attach ``component``, parenting it to this object's transform."""
        component.set_parent(self.get_component(Transform))
        self.components.append(component)

    def get_component(self, component_type: type[C]) -> C | None:
        """The first component whose exact type is ``component_type``."""
        return next((c for c in self.components if type(c) is component_type), None)  # type: ignore[return-value]

    def on_update(self, ts: Timestep) -> None:
        if not self.active:
            return
        for component in self.components:
            component.on_update(ts)
        if self._update_fn is not None:
            self._update_fn(float(ts), self)

    def set_update_fn(self, callback: UpdateFn | None) -> None:
        """Call ``callback(seconds, obj)`` after the components each frame."""
        self._update_fn = callback