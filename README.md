# physixal

This package holds the core of a small 3D engine that does not depend on any platform. It contains:

- **Key and mouse codes** (`physixal.keycodes`). `KeyCode` and `MouseCode` are integer enums that use the usual desktop windowing numbers. For example, `KeyCode.W == 87` and `MouseCode.BUTTON_RIGHT == 1`. `str()` and `format()` of a code give its number.
- **Timesteps** (`physixal.timestep`). `Timestep(time)` is a frame delta in seconds. It has the properties `seconds`, `milliseconds` and `frames_per_second`. `frames_per_second` is infinite for a zero step. `float(ts)` also works.
- **Events** (`physixal.events`). The window and application events are `WindowResizeEvent`, `WindowCloseEvent`, `AppTickEvent`, `AppUpdateEvent` and `AppRenderEvent`. The keyboard events are `KeyPressedEvent`, `KeyReleasedEvent` and `KeyTypedEvent`. The mouse events are `MouseMovedEvent`, `MouseScrolledEvent`, `MouseButtonPressedEvent` and `MouseButtonReleasedEvent`.
  - Each event carries an `EventType` and `EventCategory` flags, and has `is_in_category()`.
  - Each event has a `handled` flag, which is keyword-only.
  - `EventDispatcher(event).dispatch(EventClass, handler)` calls the handler only when the event has that class's type. It ORs the handler's result into `event.handled`.
- **Layers** (`physixal.layers`).
  - `Layer` has the hooks `on_attach`, `on_detach`, `on_update` and `on_event`.
  - `LayerStack` keeps regular layers (`push_layer`) below overlays (`push_overlay`).
  - `pop_layer` and `pop_overlay` detach and remove a layer.
  - `close()` detaches every layer. A `LayerStack` also works as a context manager and closes itself on exit.
  - Iterating a stack goes from bottom to top. `reversed()` goes from top to bottom.
- **Entity-component system** (`physixal.ecs`).
  - `ECSManager.create_entity()` hands out entities with increasing ids. `entities()` lists them in creation order. `selected_entity` holds the current selection.
  - `Entity.add_component(Type, *args, **kwargs)` builds a component and attaches it. An entity holds at most one component per type.
  - `get_component` returns the component or `None`, and `has_component` checks for one.
  - Passing a type that is not a `Component` raises `TypeError`.
- **Scene components** (`physixal.components`).
  - `ModelComponent` holds mesh, shader and texture paths.
  - `TransformComponent` holds a position, a rotation quaternion `(w, x, y, z)` and a scale, as numpy arrays.
  - `model_matrix()` returns translate · rotate · scale as a 4×4 matrix.
- **Input** (`physixal.input`).
  - `Input` is the abstract polling interface. Its methods are `is_key_pressed`, `is_mouse_button_pressed`, `mouse_position`, `mouse_x`, `mouse_y` and `set_cursor_mode`.
  - `InputState` implements it. Its `on_event()` tracks keys, buttons and the cursor from key, mouse-button and mouse-moved events.
- **Camera** (`physixal.camera`).
  - `Camera` is a free-flying perspective camera.
  - `init_camera` / `update_projection` set a projection with depth in [0, 1]. A zero height or equal near and far planes raise `ValueError`.
  - `view()` returns a look-at matrix.
  - `on_update(input, ts)` moves and turns the camera, but only while left shift is held:
    - W/A/S/D/Q/E move it.
    - The arrow keys turn it.
    - Dragging with the right mouse button turns it.
  - Pitch is kept within ±89°.
- **Logging** (`physixal.log`, `physixal.core`).
  - `log.init(log_file)` creates a core logger named `PHYSIXAL` and a client logger named `APP`. Both write to stdout and to a log file (default `PhysiXal.log`, truncated on start) and have an extra `trace` level. Calling `init` twice raises `RuntimeError`.
  - `core.initialize_core()` starts logging and announces build `core.BUILD_ID`. `core.shutdown_core()` announces shut-down and closes the loggers.
- **Profiling** (`physixal.instrumentor`).
  - `Instrumentor.get()` returns the process-wide profiler. It writes trace-event JSON to the file of the open session.
  - `InstrumentationTimer` times a scope from construction until `stop()` or the end of a `with` block.
  - `cleanup_output_string(expr, remove)` strips a substring from a name and turns double quotes into single quotes.
- **Utilities**.
  - `physixal.string_utilities` has `to_wide_string` (UTF-8 bytes to `str`), `to_utf8_string` (`str` to UTF-8 bytes) and `extract_file_name` (the part after the last `/` or `\`).
  - `physixal.cpu_id.decode_cpu_info(cpuid)` builds a `CPUInfo` from a function that returns the `(eax, ebx, ecx, edx)` registers for a CPUID leaf and sub-leaf. `CPUInfo` holds the vendor, brand string, cores, logical CPUs and SSE/AVX flags.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from physixal.events import EventDispatcher, KeyPressedEvent
from physixal.keycodes import KeyCode
from physixal.layers import Layer, LayerStack
from physixal.timestep import Timestep


class GameLayer(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self.on_key)

    def on_key(self, event):
        print(event)  # "KeyPressedEvent: 87 (0 repeats)"
        return True


with LayerStack() as stack:
    stack.push_layer(GameLayer("game"))

    event = KeyPressedEvent(KeyCode.W, 0)
    for layer in reversed(stack):
        if event.handled:
            break
        layer.on_event(event)

    for layer in stack:
        layer.on_update(Timestep(0.016))
```

## Driving the camera

```python
from physixal.camera import Camera
from physixal.events import KeyPressedEvent
from physixal.input import InputState
from physixal.keycodes import KeyCode

camera = Camera()
camera.init_camera(45.0, 1600, 900, 0.1, 100.0)

state = InputState()
state.on_event(KeyPressedEvent(KeyCode.LEFT_SHIFT))
state.on_event(KeyPressedEvent(KeyCode.W))

camera.on_update(state, 0.016)
clip_from_world = camera.projection() @ camera.view()
```

## Profiling

```python
from physixal.instrumentor import InstrumentationTimer, Instrumentor

profiler = Instrumentor.get()
profiler.begin_session("Startup", "startup.json")
with InstrumentationTimer("load assets"):
    ...
profiler.end_session()
```

Trace viewers that read the trace-event format can open the file this produces. If no session is open, timings are dropped.

## What this package does not do

The package has no window, renderer, GUI or application run loop, and it provides no command to run.

The only source of input is `InputState`. You must feed it events yourself, because nothing here reads a real keyboard or mouse.

`decode_cpu_info` does not run the CPUID instruction. It only decodes the register values that you pass to it.