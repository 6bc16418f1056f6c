import pytest

from ballance_tas.history import (
    DEFAULT_MAX_HISTORY,
    PhysicsHistory,
    TrajectoryPlane,
    Vector,
)


def test_magnitude_of_right_triangle():
    assert Vector(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0)


def test_zero_vector_magnitude():
    assert Vector().magnitude() == 0.0


@pytest.mark.parametrize(
    "current,expected",
    [
        (TrajectoryPlane.XZ, TrajectoryPlane.XY),
        (TrajectoryPlane.XY, TrajectoryPlane.YZ),
        (TrajectoryPlane.YZ, TrajectoryPlane.ZX),
        (TrajectoryPlane.ZX, TrajectoryPlane.YX),
        (TrajectoryPlane.YX, TrajectoryPlane.ZY),
        (TrajectoryPlane.ZY, TrajectoryPlane.XZ),
    ],
)
def test_plane_cycle_order(current, expected):
    assert TrajectoryPlane.next(current) == expected


def test_plane_cycle_returns_to_start():
    plane = TrajectoryPlane.XZ.next().next().next().next().next().next()
    assert plane == TrajectoryPlane.XZ


@pytest.mark.parametrize(
    "plane,labels",
    [
        (TrajectoryPlane.XZ, ("X", "Z")),
        (TrajectoryPlane.XY, ("X", "Y")),
        (TrajectoryPlane.YZ, ("Y", "Z")),
        (TrajectoryPlane.ZX, ("Z", "X")),
        (TrajectoryPlane.YX, ("Y", "X")),
        (TrajectoryPlane.ZY, ("Z", "Y")),
    ],
)
def test_axis_labels(plane, labels):
    assert plane.axis_labels() == labels


@pytest.mark.parametrize(
    "plane,expected",
    [
        (TrajectoryPlane.XZ, (1.0, 3.0)),
        (TrajectoryPlane.XY, (1.0, 2.0)),
        (TrajectoryPlane.YZ, (2.0, 3.0)),
        (TrajectoryPlane.ZX, (3.0, 1.0)),
        (TrajectoryPlane.YX, (2.0, 1.0)),
        (TrajectoryPlane.ZY, (3.0, 2.0)),
    ],
)
def test_coordinates(plane, expected):
    assert plane.coordinates(Vector(1.0, 2.0, 3.0)) == expected


def test_default_limit():
    assert PhysicsHistory().max_history == DEFAULT_MAX_HISTORY == 300


def test_add_frame_records_components():
    history = PhysicsHistory()
    velocity = Vector(1.0, -2.0, 0.5)
    angular = Vector(0.0, 2.0, 0.0)
    history.add_frame(velocity, Vector(4.0, 5.0, 6.0), angular, 7)
    assert list(history.velocity_x) == [1.0]
    assert list(history.velocity_y) == [-2.0]
    assert list(history.velocity_z) == [0.5]
    assert list(history.speed) == [pytest.approx(velocity.magnitude())]
    assert list(history.angular_speed) == [pytest.approx(angular.magnitude())]
    assert history.positions() == [Vector(4.0, 5.0, 6.0)]
    assert list(history.frame_numbers) == [7]


def test_history_drops_oldest_frames():
    history = PhysicsHistory(max_history=3)
    for frame in range(5):
        history.add_frame(Vector(), Vector(float(frame), 0.0, 0.0), Vector(), frame)
    assert len(history) == 3
    assert list(history.frame_numbers) == [2, 3, 4]
    assert list(history.position_x) == [2.0, 3.0, 4.0]
    assert len(history.speed) == len(history.position_z) == 3


def test_clear_empties_every_series():
    history = PhysicsHistory()
    history.add_frame(Vector(1, 1, 1), Vector(1, 1, 1), Vector(1, 1, 1), 1)
    history.clear()
    assert len(history) == 0
    assert not history.speed and not history.position_y and not history.velocity_z


def test_bounds_empty_are_zero():
    assert PhysicsHistory().trajectory_bounds(TrajectoryPlane.XZ) == (0.0, 0.0, 0.0, 0.0)


def test_bounds_follow_plane():
    history = PhysicsHistory()
    for frame, pos in enumerate(
        [Vector(1.0, 10.0, -4.0), Vector(-2.0, 20.0, 8.0), Vector(5.0, 15.0, 0.0)]
    ):
        history.add_frame(Vector(), pos, Vector(), frame)
    assert history.trajectory_bounds(TrajectoryPlane.XZ) == (-2.0, 5.0, -4.0, 8.0)
    assert history.trajectory_bounds(TrajectoryPlane.ZY) == (-4.0, 8.0, 10.0, 20.0)
    assert history.trajectory_bounds(TrajectoryPlane.YX) == (10.0, 20.0, -2.0, 5.0)


def test_bounds_contain_every_projection():
    history = PhysicsHistory()
    for frame in range(10):
        history.add_frame(
            Vector(), Vector(frame * 0.5, -frame, frame * frame), Vector(), frame
        )
    for plane in TrajectoryPlane:
        lo1, hi1, lo2, hi2 = history.trajectory_bounds(plane)
        for pos in history.positions():
            c1, c2 = plane.coordinates(pos)
            assert lo1 <= c1 <= hi1
            assert lo2 <= c2 <= hi2