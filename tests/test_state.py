"""Tests for the World: start-up placement, pause gating and the control operations."""

import math
import threading

import pytest

from bouncingball.config import INITIAL_RADIUS, INITIAL_SPEED, SPAWN_MARGIN
from bouncingball.model.ball import Ball
from bouncingball.model.container import Container
from bouncingball.model.state import World, WorldSnapshot


class TestCreate:
    """World.create places the ball inside the box with the spawn margin."""

    @pytest.mark.parametrize("seed", range(20))
    def test_spawn_respects_margin(self, seed):
        world = World.create(640, 480, seed=seed)
        ball, box = world.ball, world.box

        assert ball.radius == INITIAL_RADIUS
        assert ball.x - ball.radius >= box.min_x + SPAWN_MARGIN
        assert ball.x + ball.radius <= box.max_x - SPAWN_MARGIN
        assert ball.y - ball.radius >= box.min_y + SPAWN_MARGIN
        assert ball.y + ball.radius <= box.max_y - SPAWN_MARGIN
        assert ball.speed == pytest.approx(INITIAL_SPEED)

    @pytest.mark.parametrize("seed", range(5))
    def test_heading_is_whole_degrees(self, seed):
        ball = World.create(640, 480, seed=seed).ball
        heading = math.degrees(math.atan2(ball.speed_y, ball.speed_x)) % 360.0
        fraction = heading % 1.0
        assert min(fraction, 1.0 - fraction) < 1e-6

    def test_same_seed_same_world(self):
        a = World.create(640, 480, seed=42).snapshot()
        b = World.create(640, 480, seed=42).snapshot()
        assert a == b

    def test_box_fills_canvas(self):
        box = World.create(800, 600, seed=0).box
        assert (box.min_x, box.min_y, box.max_x, box.max_y) == (0.0, 0.0, 800.0, 600.0)

    def test_starts_running(self):
        assert World.create(640, 480, seed=0).paused is False


class TestTick:

    def test_tick_steps_ball(self, world):
        assert world.tick() is True
        assert (world.ball.x, world.ball.y) == (103.0, 104.0)
        assert world.steps == 1

    def test_paused_tick_does_nothing(self, world):
        world.set_paused(True)

        assert world.tick() is False
        assert (world.ball.x, world.ball.y) == (100.0, 100.0)
        assert world.steps == 0

    def test_resume_after_pause(self, world):
        world.set_paused(True)
        world.tick()
        world.set_paused(False)

        assert world.tick() is True
        assert world.ball.x == 103.0

    def test_toggle_paused(self, world):
        assert world.toggle_paused() is True
        assert world.toggle_paused() is False


class TestControls:

    def test_set_speed_rescales(self, world):
        world.set_speed(10)
        assert (world.ball.speed_x, world.ball.speed_y) == (pytest.approx(6.0), pytest.approx(8.0))
        assert world.get_speed() == pytest.approx(10.0)

    def test_set_radius_recenters(self, world):
        world.ball.x = 170.0

        world.set_radius(50)

        assert world.ball.radius == 50.0
        assert world.ball.x == 150.0
        assert world.ball.y == 100.0

    def test_resize_recenters_per_axis(self, world):
        world.ball.x, world.ball.y = 180.0, 60.0

        world.resize(0, 0, 120, 200)

        assert world.ball.x == 110.0
        assert world.ball.y == 60.0

    def test_container_resize_alone_does_not_move_ball(self, world):
        world.ball.x = 180.0
        world.box.resize(0, 0, 120, 200)
        assert world.ball.x == 180.0

    def test_oversized_radius_is_logged(self, world, caplog_debug):
        world.set_radius(150)
        assert "exceeds half of the container" in caplog_debug.text

    def test_oversized_after_resize_is_logged(self, world, caplog_debug):
        world.set_radius(40)
        world.resize(0, 0, 60, 300)
        assert "exceeds half of the container" in caplog_debug.text

    def test_fitting_radius_is_quiet(self, world, caplog_debug):
        world.set_radius(90)
        assert "exceeds" not in caplog_debug.text


class TestSnapshot:

    def test_snapshot_copies_state(self, world):
        snap = world.snapshot()

        assert isinstance(snap, WorldSnapshot)
        assert (snap.x, snap.y, snap.radius) == (100.0, 100.0, 10.0)
        assert (snap.max_x, snap.max_y) == (200.0, 200.0)
        assert snap.label == str(world.ball)
        assert snap.paused is False

    def test_snapshot_is_detached(self, world):
        snap = world.snapshot()
        world.tick()
        assert snap.x == 100.0

    def test_snapshot_is_frozen(self, world):
        snap = world.snapshot()
        with pytest.raises(AttributeError):
            snap.x = 0.0


def test_concurrent_controls_keep_ball_inside():
    """Stepping and resizing from two threads never leaves a torn state."""
    world = World(
        ball=Ball(x=100.0, y=100.0, radius=10.0, speed_x=7.0, speed_y=-5.0),
        box=Container(0.0, 0.0, 200.0, 200.0),
    )
    stop = threading.Event()

    def resizer():
        sizes = [(0, 0, 200, 200), (0, 0, 120, 90), (0, 0, 300, 150)]
        i = 0
        while not stop.is_set():
            world.resize(*sizes[i % len(sizes)])
            i += 1

    thread = threading.Thread(target=resizer)
    thread.start()
    try:
        for _ in range(5000):
            world.tick()
            snap = world.snapshot()
            assert snap.x - snap.radius >= snap.min_x
            assert snap.x + snap.radius <= snap.max_x
            assert snap.y - snap.radius >= snap.min_y
            assert snap.y + snap.radius <= snap.max_y
    finally:
        stop.set()
        thread.join()
