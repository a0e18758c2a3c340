"""
World State (Data Model)
========================
This module defines the central data structure for the running animation.

Why is this file needed?
------------------------
1. State Management: It owns the single Ball, its Container and the pause flag
   in one place.
2. Thread Safety: The simulation thread steps the ball while the GUI thread
   edits speed, radius and size. Every access goes through one lock.
3. Decoupling: Views paint immutable snapshots; controls call the setters.

Classes:
    WorldSnapshot: Frozen copy of everything needed to draw one frame.
    World: The lock-guarded container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import threading
from typing import Optional

import numpy as np

from bouncingball.config import INITIAL_RADIUS, INITIAL_SPEED, SPAWN_MARGIN
from bouncingball.model.ball import Ball
from bouncingball.model.container import Container

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorldSnapshot:
    x: float
    y: float
    radius: float
    speed_x: float
    speed_y: float
    ball_color: str
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    fill_color: str
    border_color: str
    paused: bool
    label: str


@dataclass
class World:
    """
    Holds the ball, the container and the pause flag.
    Pass this instance to the simulation worker and to the views.
    """
    ball: Ball
    box: Container
    paused: bool = False
    steps: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def create(cls, width: float, height: float, seed: Optional[int] = None,
               rng: Optional[np.random.Generator] = None) -> World:
        """
        Build a world filling a canvas of the given size.

        The ball gets the fixed initial radius and speed, a random heading
        (whole degrees, 0-359) and a random position keeping the circle
        SPAWN_MARGIN away from every wall.
        """
        if rng is None:
            rng = np.random.default_rng(seed)

        radius = INITIAL_RADIUS
        margin = SPAWN_MARGIN
        x = rng.integers(int(width - 2 * (radius + margin))) + radius + margin
        y = rng.integers(int(height - 2 * (radius + margin))) + radius + margin
        angle_in_degree = int(rng.integers(360))

        ball = Ball.from_heading(x, y, radius, INITIAL_SPEED, angle_in_degree)
        box = Container.from_size(width, height)
        logger.debug(f"Ball spawned at ({ball.x:.0f}, {ball.y:.0f}), heading {angle_in_degree} deg.")
        return cls(ball=ball, box=box)

    # ------------------------------------------------------------------------------
    # Simulation thread
    # ------------------------------------------------------------------------------

    def tick(self) -> bool:
        """Advance the ball by one step unless paused. Returns True if it moved."""
        with self._lock:
            if self.paused:
                return False
            self.ball.step(self.box)
            self.steps += 1
            return True

    # ------------------------------------------------------------------------------
    # Controls (GUI thread)
    # ------------------------------------------------------------------------------

    def set_paused(self, paused: bool) -> None:
        with self._lock:
            self.paused = bool(paused)
        logger.debug("Animation paused." if paused else "Animation resumed.")

    def toggle_paused(self) -> bool:
        with self._lock:
            self.paused = not self.paused
            return self.paused

    def get_speed(self) -> float:
        with self._lock:
            return self.ball.speed

    def set_speed(self, new_speed: float) -> None:
        """Rescale the ball velocity to `new_speed`, keeping its heading."""
        with self._lock:
            self.ball.rescale_speed(new_speed)

    def set_radius(self, radius: float) -> None:
        """Change the ball radius and pull the ball back inside the box."""
        with self._lock:
            self.ball.radius = float(radius)
            self.ball.recenter(self.box)
            self._warn_if_oversized()

    def resize(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        """Resize the container, then pull the ball back inside the new bounds."""
        with self._lock:
            self.box.resize(min_x, min_y, max_x, max_y)
            self.ball.recenter(self.box)
            self._warn_if_oversized()

    def snapshot(self) -> WorldSnapshot:
        with self._lock:
            ball, box = self.ball, self.box
            return WorldSnapshot(
                x=ball.x,
                y=ball.y,
                radius=ball.radius,
                speed_x=ball.speed_x,
                speed_y=ball.speed_y,
                ball_color=ball.color,
                min_x=box.min_x,
                min_y=box.min_y,
                max_x=box.max_x,
                max_y=box.max_y,
                fill_color=box.fill_color,
                border_color=box.border_color,
                paused=self.paused,
                label=str(ball),
            )

    def _warn_if_oversized(self) -> None:
        # Caller holds the lock
        if not self.box.fits(self.ball.radius):
            logger.warning(
                f"Ball radius {self.ball.radius:g} exceeds half of the container "
                f"({self.box.width:g}x{self.box.height:g}); wall collisions are undefined."
            )
