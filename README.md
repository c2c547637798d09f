# orbitengine

The core of a small layered game engine. It provides events and a dispatcher,
a stack of layers, global keyboard and mouse state, hierarchical transforms,
a yaw/pitch fly camera, a reader for binary `.obt` mesh files, scene objects
that own components, and an application frame loop.

The package does not depend on any graphics API or windowing system. The
actual drawing is done by a `Renderer` that you supply, and the actual
window by a `Window` that you supply.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

- `orbitengine.timestep`: `Timestep(time)` is a frame delta. It has the
  properties `seconds` and `milliseconds` and supports `float()`.
- `orbitengine.events`: `Event` is the base class, and its subclasses are
  `WindowResizeEvent`, `WindowCloseEvent`, `KeyPressedEvent`,
  `KeyReleasedEvent`, `MouseMovedEvent`, `MouseScrolledEvent`,
  `MouseButtonPressedEvent` and `MouseButtonReleasedEvent`.
  - Every event has a `name`, `category_flags` (an `EventCategory` flag set),
    `is_in_category()` and a `handled` flag.
  - `EventDispatcher(event).dispatch(EventClass, func)` calls `func` only when
    the event has that type. It stores the result in `handled`.
  - `MouseScrolledEvent.y_offset` reports the horizontal offset.
- `orbitengine.layers`:
  - `Layer(name)` has the hooks `on_attach`, `on_detach`, `on_update(ts)` and
    `on_event(event)`. `on_update` counts frames in `frames`.
  - `LayerStack` puts each pushed layer in front of the layers pushed before
    it. Overlays go after everything.
  - Iterating a `LayerStack` runs front to back, and `reversed()` runs back
    to front.
- `orbitengine.log`:
  - `init()` sets up the `"Orbit"` and `"App"` loggers to write every level
    to stdout, including a `TRACE` level (5). It uses colour when stdout is
    a terminal.
  - `core_logger()` and `client_logger()` return those loggers.
- `orbitengine.window`: `WindowConfig` holds a title and a size, with the
  defaults `"Orbit Engine"` and 1280×720. `Window` is the abstract window
  interface.
- `orbitengine.input`: `Input` is a layer that records key and mouse-button
  states (`KeyState`), the cursor position and the scroll offsets from
  events, and marks those events as handled.
  - Query the state with `Input.is_key_down()`,
    `Input.is_mouse_button_down()`, `Input.key_state()`,
    `Input.mouse_position()` and `Input.mouse_scroll()`.
  - The state is shared by the whole process. `Input.reset()` clears it.
- `orbitengine.component`: `Component` is the base for anything an object
  owns. `ComponentLayer` is an abstract layer.
- `orbitengine.transform`: `Transform` holds a local `position`, `rotation`
  and `scale` as numpy arrays.
  - `world_position` and `world_rotation` add up the values of every
    ancestor.
  - `set_scale()` accepts one number or three.
  - `set_parent()` accepts only a `Transform` and refuses to create cycles.
- `orbitengine.camera`:
  - `look_at(eye, center, up)` builds a row-major view matrix.
  - `Camera` has the movement methods `move_forward`, `move_backward`,
    `move_left` and `move_right`, plus `translate`, `add_yaw`, `add_pitch`
    (pitch is clamped to ±89°), `set_fov` and `view_matrix`.
  - Creating a camera makes it the active camera.
- `orbitengine.renderer`:
  - `Renderer` is the abstract back end.
  - `install()` and `get_renderer()` set and return the renderer used by the
    whole process.
  - `update()`, `generate_buffers()` and `draw_submesh()` forward to the
    installed renderer. With no renderer installed they log
    `NO RENDER FOUND!` instead.
  - `get_active_camera()` and `set_active_camera()` manage the active camera.
- `orbitengine.texture`: `Texture(path)` loads an image through the
  installed renderer, and raises `RuntimeError` if there is none.
  `TextureType` lists the texture roles.
- `orbitengine.submesh`: `SubMesh` holds vertices, normals, UVs, indices, a
  transform and textures. `generate()` uploads it through the renderer.
- `orbitengine.mesh_loader`: `load_submeshes(path, parent)` and
  `read_submesh(stream, index, parent)` read the binary mesh format
  described below. A truncated file raises `MeshFormatError`.
- `orbitengine.mesh`: `Mesh(path)` loads and uploads its sub-meshes. It
  draws them with the active camera on every `on_update`.
- `orbitengine.entity`: `Object(name, application)` is a layer that adds
  itself to the application.
  - It always owns a `Transform`. Components added later are parented to it.
  - `get_component(Type)` returns the first component whose type is exactly
    `Type`.
  - `set_update_fn(callback)` registers `callback(seconds, obj)`, which runs
    after the components on every frame.
- `orbitengine.application`: `Application(window, renderer=None, clock=None)`
  owns a `LayerStack` that starts with an `Input` layer.
  - `step()` runs one frame: renderer update, layer updates, `update()` and
    then `window.on_update()`.
  - `run()` repeats frames until a `WindowCloseEvent` arrives, and then
    calls `destroy()`.
  - `on_event()` offers each event to the layers from the back to the front,
    and stops at the first layer that handles it.
  - `Application.current()` returns the most recently created application.

## Mesh file format

A mesh is stored in several files:

- **The main file** holds the number of sub-meshes as a little-endian
  unsigned 32-bit integer.
- **Sub-mesh `i`** is stored in a file named after the main file with `i`
  appended, for example `plane.obt0`. Its contents, in order:
  1. **Counts**: three little-endian float32 values. These are the vertex
     count and the index count; the third value is unused.
  2. **Flags**: three float32 values. These are has-normals and has-UVs; the
     third value is unused.
  3. **Position**: three float32 values.
  4. **Vertices**: three float32 values for each vertex.
  5. **Normals**: three float32 values for each vertex.
  6. **UVs**: two float32 values for each vertex, present only when the
     has-UVs flag is set. The V coordinate is negated on load.
  7. **Indices**: unsigned 32-bit integers. Only whole triangles are kept,
     which means the first `(index_count // 3) * 3` values.

If the main file is missing, the mesh has no sub-meshes. If a sub-mesh file
is missing, the loader logs an error and stops loading at that point.

## Example

```python
from orbitengine.application import Application
from orbitengine.events import KeyPressedEvent, WindowCloseEvent
from orbitengine.input import Input
from orbitengine.window import Window, WindowConfig


class HeadlessWindow(Window):
    def __init__(self, config=None):
        self.config = config or WindowConfig()
        self.callback = None
        self.vsync = True

    def on_update(self):
        pass

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    def set_event_callback(self, callback):
        self.callback = callback

    def set_vsync(self, enabled):
        self.vsync = enabled

    def set_cursor_visible(self, value):
        pass

    def force_cursor_center(self, value):
        pass

    def is_vsync(self):
        return self.vsync


window = HeadlessWindow()
app = Application(window, clock=iter(range(100)).__next__)

window.callback(KeyPressedEvent(ord("W"), 0))
assert Input.is_key_down(ord("W"))

print(app.step().seconds)       # 1.0 with this counting clock
window.callback(WindowCloseEvent())
assert not app.running
```

With no renderer installed, each frame logs `NO RENDER FOUND!` on the
`"Orbit"` logger.

## What the package does not do

There is no concrete `Window` and no concrete `Renderer` in the package.
That means it does not:

- open windows;
- read from input devices;
- compile shaders;
- decode images;
- draw anything.

To run on a real screen, implement these two interfaces on top of a
windowing or graphics library and pass them to `Application`. There is no
command-line program either.

## Running the tests

```
pytest
```