"""
Ball (Physics Core)
===================
A circular body moving inside a `Container`.

Why is this file needed?
------------------------
1. Physics: `step()` advances the ball by one time unit and reflects it off
   the container walls (ideal elastic reflection, no energy loss).
2. Controls: speed rescaling and recentering keep the live-editable fields
   consistent with the container.

Coordinates follow the screen convention: y grows downward, so a heading
angle increases clockwise from the positive x-axis.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from bouncingball.config import BALL_COLOR
from bouncingball.model.container import Container

logger = logging.getLogger(__name__)


@dataclass
class Ball:
    x: float
    y: float
    radius: float
    speed_x: float
    speed_y: float
    color: str = BALL_COLOR

    @classmethod
    def from_heading(cls, x: float, y: float, radius: float, speed: float,
                     angle_in_degree: float, color: str = BALL_COLOR) -> Ball:
        """Create a ball from a scalar speed and a heading in degrees."""
        angle = np.deg2rad(angle_in_degree)
        return cls(
            x=float(x),
            y=float(y),
            radius=float(radius),
            speed_x=float(speed * np.cos(angle)),
            speed_y=float(speed * np.sin(angle)),
            color=color,
        )

    # ------------------------------------------------------------------------------
    # Physics
    # ------------------------------------------------------------------------------

    def step(self, box: Container) -> None:
        """
        Move one time unit and resolve wall penetration.

        Each axis is checked on its own, so a ball hitting a corner reflects
        both components in the same step. A radius larger than half the
        smaller box dimension makes the two clamps of an axis fight each
        other; the result in that regime is undefined and not guarded here.
        """
        self.x += self.speed_x
        self.y += self.speed_y

        if self.x - self.radius < box.min_x:
            self.x = box.min_x + self.radius
            self.speed_x = -self.speed_x
        elif self.x + self.radius > box.max_x:
            self.x = box.max_x - self.radius
            self.speed_x = -self.speed_x

        if self.y - self.radius < box.min_y:
            self.y = box.min_y + self.radius
            self.speed_y = -self.speed_y
        elif self.y + self.radius > box.max_y:
            self.y = box.max_y - self.radius
            self.speed_y = -self.speed_y

    # ------------------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------------------

    @property
    def speed(self) -> float:
        """Magnitude of the velocity."""
        return float(np.hypot(self.speed_x, self.speed_y))

    def get_speed(self) -> float:
        return self.speed

    def rescale_speed(self, new_speed: float) -> None:
        """Change the speed magnitude, keeping the heading."""
        current = self.speed
        if current == 0.0:
            logger.warning("Cannot rescale a ball at rest: heading is undefined.")
            return
        ratio = new_speed / current
        self.speed_x *= ratio
        self.speed_y *= ratio

    def recenter(self, box: Container) -> None:
        """Clamp the position into the box per axis, as a wall hit would. Velocity is kept."""
        if self.x - self.radius < box.min_x:
            self.x = box.min_x + self.radius
        elif self.x + self.radius > box.max_x:
            self.x = box.max_x - self.radius

        if self.y - self.radius < box.min_y:
            self.y = box.min_y + self.radius
        elif self.y + self.radius > box.max_y:
            self.y = box.max_y - self.radius

    def __str__(self) -> str:
        return f"({self.x:3.0f},{self.y:3.0f}) V=({self.speed_x:2.0f},{self.speed_y:2.0f})"
