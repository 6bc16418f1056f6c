# ballance_tas

Building blocks for tool-assisted runs of Ballance:

- `ballance_tas.input`: a deterministic keyboard input system that turns
  key names into a 256-entry keyboard state for each game tick;
- `ballance_tas.events`: a small dispatcher of named events;
- `ballance_tas.history` and `ballance_tas.overlay`: the data side of an
  in-game on-screen display: physics history, trajectory planes, panel
  configuration and display colours.

The package has no runtime dependencies.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Input

`InputSystem` keeps one `KeyState` per scan code (`Key` lists the codes).
Key strings are case-insensitive and may name several keys separated by
whitespace, such as `"up right"`; duplicates are ignored and unknown names
are skipped. Aliases exist, for example `shift` for `lshift` and `esc` for
`escape`.

```python
from ballance_tas.input import InputSystem

inputs = InputSystem()
inputs.enabled = True
inputs.hold_keys("up lshift", 3)

state = bytearray(256)
inputs.apply(0, state)
print(inputs.are_keys_down("up shift"))   # True
print(inputs.available_keys()[:5])
```

- `press_keys`, `press_keys_one_frame`, `hold_keys` (for a number of
  ticks), `release_keys` and `release_all_keys` change key state.
- `are_keys_down`, `are_keys_up` and `are_keys_toggled` return `True` only
  when every named key is known and matches; an empty string gives `False`.
- `key_code` returns a key's scan code, or `0` for an unknown name;
  `is_valid_key` tells whether a name is known.
- `apply(tick, buffer)` counts down held keys, writes the state of all 256
  keys into `buffer` and then clears keys released in that frame. It does
  nothing while `enabled` is `False`.
- `reset` clears all keys and the tick counter; `reset_keyboard_state`
  sets a keyboard buffer to idle.

## Events

`EventManager` calls the listeners of an event in the order they were
registered, passing on the arguments given to `fire_event`.

```python
from ballance_tas.events import EventManager

events = EventManager()
events.register_listener("level_finish", lambda: print("done"))
events.register_once_listener("level_finish", lambda: print("only once"))
events.fire_event("level_finish")
print(events.listener_count("level_finish"))  # 1
```

An empty event name raises `ValueError` and a non-callable listener
`TypeError`. A listener that raises does not stop the others: the error is
passed to the `error_handler` given to `EventManager`, which by default
logs it. One-time listeners are removed after their call even when they
fail. `clear_listeners()` drops everything, `clear_listeners(name)` one
event; `has_listeners` and `listener_count` report what is registered.

## On-screen display data

`ballance_tas.history` holds:

- `Vector`, a frozen three-component vector with `magnitude()`;
- `TrajectoryPlane` (`XZ`, `XY`, `YZ`, `ZX`, `YX`, `ZY`), with `next()`,
  `coordinates(position)` and `axis_labels()`;
- `PhysicsHistory`, a record of velocity, speed, position, angular speed
  and frame number that keeps at most `max_history` frames (300 by
  default), with `add_frame`, `clear`, `positions` and
  `trajectory_bounds(plane)`.

`ballance_tas.overlay.InGameOSD` keeps the display's configuration: panel
visibility per `OSDPanel` (all shown except `PHYSICS` by default),
position clamped to `[0, 1]` by `set_position`, opacity, scale, the graph
time range (clamped to 1–30 seconds, which resizes the history at 60
frames per second) and the trajectory plane (`cycle_trajectory_plane`).
`should_update(time)` limits sampling to about 60 times per second, and
`record(snapshot, frame)` stores a `PhysicsSnapshot` and adds it to the
history when it is valid. `KeyDisplayState.from_pressed` builds the key
panel's state from a function that reports whether a scan code is down.

`velocity_color`, `speed_state` and `spin_color` pick the labels and RGBA
colours used for velocity components, the motion state and the spin
read-out.

## What it does not do

The package draws nothing and attaches to no running game: it has no
window or rendering code, no hooks into the game's input or timing, and no
script runner. It provides the state and rules that such parts would use.