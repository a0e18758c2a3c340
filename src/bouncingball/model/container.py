"""
Container Box
=============
The axis-aligned rectangle the ball bounces in.

The extents are overwritten in place when the canvas is resized; callers
guarantee `min_x < max_x` and `min_y < max_y`. Nothing here validates them.
"""
from __future__ import annotations

from dataclasses import dataclass

from bouncingball.config import BOX_BORDER_COLOR, BOX_FILL_COLOR


@dataclass
class Container:
    """Inner usable rectangle of the world."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    fill_color: str = BOX_FILL_COLOR
    border_color: str = BOX_BORDER_COLOR

    @classmethod
    def from_size(cls, width: float, height: float) -> Container:
        """A container filling a canvas of the given size."""
        return cls(0.0, 0.0, float(width), float(height))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def resize(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        self.min_x = float(min_x)
        self.min_y = float(min_y)
        self.max_x = float(max_x)
        self.max_y = float(max_y)

    def contains(self, x: float, y: float, radius: float) -> bool:
        """True if the circle at (x, y) lies fully inside the rectangle."""
        return (
            x - radius >= self.min_x
            and x + radius <= self.max_x
            and y - radius >= self.min_y
            and y + radius <= self.max_y
        )

    def fits(self, radius: float) -> bool:
        """True if a circle of this radius can sit inside without touching both opposite walls."""
        return 2 * radius <= min(self.width, self.height)
