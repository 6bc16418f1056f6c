"""State and presentation rules of the in-game on-screen display."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .history import PhysicsHistory, TrajectoryPlane, Vector
from .input import Key

Color = tuple[float, float, float, float]

LOW_COLOR: Color = (0.3, 1.0, 0.3, 1.0)
MEDIUM_COLOR: Color = (1.0, 0.8, 0.3, 1.0)
HIGH_COLOR: Color = (1.0, 0.3, 0.3, 1.0)
NEUTRAL_COLOR: Color = (0.7, 0.7, 0.7, 1.0)
SPIN_COLOR: Color = (1.0, 0.5, 0.0, 1.0)

FRAMES_PER_SECOND = 60.0
MIN_GRAPH_SECONDS = 1.0
MAX_GRAPH_SECONDS = 30.0
DEFAULT_UPDATE_INTERVAL = 0.0166


class OSDPanel(Enum):
    """Information panels the display can show."""

    STATUS = 0
    VELOCITY = 1
    POSITION = 2
    PHYSICS = 3
    KEYS = 4


_DEFAULT_PANELS = {
    OSDPanel.STATUS: True,
    OSDPanel.VELOCITY: True,
    OSDPanel.POSITION: True,
    OSDPanel.PHYSICS: False,
    OSDPanel.KEYS: True,
}


@dataclass(frozen=True)
class PhysicsSnapshot:
    """Physics state of the ball at one moment."""

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    angular_velocity: Vector = field(default_factory=Vector)
    mass: float = 0.0
    is_valid: bool = False

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    @property
    def angular_speed(self) -> float:
        return self.angular_velocity.magnitude()


@dataclass(frozen=True)
class KeyDisplayState:
    """Which of the displayed keys are held down."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    shift: bool = False
    space: bool = False
    q: bool = False
    esc: bool = False

    @classmethod
    def from_pressed(cls, is_down: Callable[[int], bool]) -> KeyDisplayState:
        """Build the state by asking ``is_down`` about each displayed key code."""
        return cls(
            up=bool(is_down(Key.UP)),
            down=bool(is_down(Key.DOWN)),
            left=bool(is_down(Key.LEFT)),
            right=bool(is_down(Key.RIGHT)),
            shift=bool(is_down(Key.LSHIFT)),
            space=bool(is_down(Key.SPACE)),
            q=bool(is_down(Key.Q)),
            esc=bool(is_down(Key.ESCAPE)),
        )


def velocity_color(velocity: float, max_velocity: float = 20.0) -> Color:
    """Colour for a velocity component: green when low, yellow, then red."""
    ratio = min(abs(velocity) / max_velocity, 1.0)
    if ratio < 0.3:
        return LOW_COLOR
    if ratio < 0.7:
        return MEDIUM_COLOR
    return HIGH_COLOR


def speed_state(speed: float) -> tuple[str, Color]:
    """Label and colour describing how fast the ball moves."""
    if speed > 10.0:
        return "Fast", HIGH_COLOR
    if speed > 3.0:
        return "Medium", MEDIUM_COLOR
    if speed > 0.5:
        return "Slow", LOW_COLOR
    return "Static", NEUTRAL_COLOR


def spin_color(angular_speed: float) -> Color:
    """Colour for the spin read-out, highlighted above one radian per second."""
    return SPIN_COLOR if angular_speed > 1.0 else NEUTRAL_COLOR


class InGameOSD:
    """Configuration and recorded data of the on-screen display."""

    def __init__(self, name: str = "OSD", history: Optional[PhysicsHistory] = None) -> None:
        self.name = name
        self.visible = False
        self.panels: dict[OSDPanel, bool] = dict(_DEFAULT_PANELS)
        self.pos_x = 0.02
        self.pos_y = 0.02
        self.opacity = 0.9
        self.scale = 1.0
        self.graph_time_range = 5.0
        self.trajectory_plane = TrajectoryPlane.XZ
        self.history = history if history is not None else PhysicsHistory()
        self.physics = PhysicsSnapshot()
        self.keys = KeyDisplayState()
        self.last_update_time = 0.0
        self.update_interval = DEFAULT_UPDATE_INTERVAL

    def is_panel_visible(self, panel: OSDPanel) -> bool:
        return self.panels.get(panel, False)

    def set_panel_visible(self, panel: OSDPanel, visible: bool) -> None:
        if panel in self.panels:
            self.panels[panel] = visible

    def toggle_panel(self, panel: OSDPanel) -> None:
        self.set_panel_visible(panel, not self.is_panel_visible(panel))

    def set_position(self, x: float, y: float) -> None:
        """Place the display at a fraction of the screen, clamped to [0, 1]."""
        self.pos_x = max(0.0, min(1.0, x))
        self.pos_y = max(0.0, min(1.0, y))

    def set_graph_time_range(self, seconds: float) -> None:
        """Set how many seconds the graphs cover, which sizes the history."""
        self.graph_time_range = max(MIN_GRAPH_SECONDS, min(MAX_GRAPH_SECONDS, seconds))
        self.history.max_history = int(self.graph_time_range * FRAMES_PER_SECOND)

    def cycle_trajectory_plane(self) -> None:
        self.trajectory_plane = self.trajectory_plane.next()

    def clear_history(self) -> None:
        self.history.clear()

    def should_update(self, current_time: float) -> bool:
        """Return whether enough time has passed to sample again, and mark it."""
        if current_time - self.last_update_time < self.update_interval:
            return False
        self.last_update_time = current_time
        return True

    def record(self, snapshot: PhysicsSnapshot, frame: int) -> None:
        """Store the latest physics state and add it to the history if valid."""
        self.physics = snapshot
        if not snapshot.is_valid:
            return
        self.history.add_frame(
            snapshot.velocity, snapshot.position, snapshot.angular_velocity, frame
        )