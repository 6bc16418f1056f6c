"""Rolling history of ball physics samples for graphs and trajectories."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_HISTORY = 300  # five seconds at 60 frames per second


@dataclass(frozen=True)
class Vector:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


class TrajectoryPlane(Enum):
    """Plane onto which the trajectory graph projects positions."""

    XZ = 0
    XY = 1
    YZ = 2
    ZX = 3
    YX = 4
    ZY = 5

    @property
    def _axes(self) -> tuple[str, str]:
        return self.name[0], self.name[1]

    def next(self) -> TrajectoryPlane:
        """Return the plane that follows this one in the viewing cycle."""
        members = list(TrajectoryPlane)
        return members[(members.index(self) + 1) % len(members)]

    def coordinates(self, position: Vector) -> tuple[float, float]:
        """Project a position onto this plane."""
        first, second = self._axes
        return (
            getattr(position, first.lower()),
            getattr(position, second.lower()),
        )

    def axis_labels(self) -> tuple[str, str]:
        return self._axes


class PhysicsHistory:
    """Per-frame physics samples, keeping at most ``max_history`` frames."""

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        self.max_history = max_history
        self.velocity_x: deque[float] = deque()
        self.velocity_y: deque[float] = deque()
        self.velocity_z: deque[float] = deque()
        self.speed: deque[float] = deque()
        self.position_x: deque[float] = deque()
        self.position_y: deque[float] = deque()
        self.position_z: deque[float] = deque()
        self.angular_speed: deque[float] = deque()
        self.frame_numbers: deque[int] = deque()

    def _series(self) -> tuple[deque, ...]:
        return (
            self.velocity_x,
            self.velocity_y,
            self.velocity_z,
            self.speed,
            self.position_x,
            self.position_y,
            self.position_z,
            self.angular_speed,
            self.frame_numbers,
        )

    def __len__(self) -> int:
        return len(self.frame_numbers)

    def add_frame(
        self,
        velocity: Vector,
        position: Vector,
        angular_velocity: Vector,
        frame: int,
    ) -> None:
        """Append one frame, dropping the oldest ones beyond the limit."""
        self.velocity_x.append(velocity.x)
        self.velocity_y.append(velocity.y)
        self.velocity_z.append(velocity.z)
        self.speed.append(velocity.magnitude())
        self.position_x.append(position.x)
        self.position_y.append(position.y)
        self.position_z.append(position.z)
        self.angular_speed.append(angular_velocity.magnitude())
        self.frame_numbers.append(frame)

        while len(self.velocity_x) > self.max_history:
            for series in self._series():
                series.popleft()

    def clear(self) -> None:
        for series in self._series():
            series.clear()

    def positions(self) -> list[Vector]:
        """Return the recorded positions, oldest first."""
        return [
            Vector(x, y, z)
            for x, y, z in zip(self.position_x, self.position_y, self.position_z)
        ]

    def trajectory_bounds(
        self, plane: TrajectoryPlane
    ) -> tuple[float, float, float, float]:
        """Return ``(min1, max1, min2, max2)`` of the positions on ``plane``.

        All four are zero when there is no history.
        """
        if not self.position_x:
            return 0.0, 0.0, 0.0, 0.0
        axis = {"X": self.position_x, "Y": self.position_y, "Z": self.position_z}
        first, second = plane.axis_labels()
        a, b = axis[first], axis[second]
        return min(a), max(a), min(b), max(b)