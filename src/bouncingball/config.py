"""
Configuration & Constants
=========================
This module serves as the central registry for global constants and the
start-up configuration of the application.

Why is this file needed?
------------------------
1. Tuning: Frame rate, initial ball parameters and control ranges are defined
   here instead of being scattered across the model and the widgets.
2. Validation: `AppConfig` rejects window sizes that cannot hold the initial
   ball before any Qt object is created.

Exports:
    UPDATE_RATE (int): Simulation steps per second.
    AppConfig: Start-up options (window size, frame rate, random seed).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Timing
UPDATE_RATE: int = 30  # frames per second

# Window
DEFAULT_WIDTH: int = 640
DEFAULT_HEIGHT: int = 480
WINDOW_TITLE: str = "A World of Balls"

# Ball at start-up
INITIAL_RADIUS: float = 100.0
INITIAL_SPEED: float = 5.0
SPAWN_MARGIN: float = 10.0

# Control ranges
MIN_SPEED: int = 2
MAX_SPEED: int = 20
MIN_RADIUS: int = 10
RADIUS_SLIDER_PADDING: int = 8

# Colors (any name accepted by QColor)
BALL_COLOR: str = "blue"
BOX_FILL_COLOR: str = "black"
BOX_BORDER_COLOR: str = "white"
INFO_TEXT_COLOR: str = "white"
INFO_FONT_FAMILY: str = "Courier New"
INFO_FONT_SIZE: int = 12


def max_radius_for(width: float, height: float) -> int:
    """Upper bound of the radius control for a canvas of the given size."""
    return int(min(width, height) / 2 - RADIUS_SLIDER_PADDING)


@dataclass
class AppConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    update_rate: int = UPDATE_RATE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}.")
        if self.update_rate <= 0:
            raise ValueError(f"Update rate must be positive, got {self.update_rate}.")

        # Room for the initial ball plus the spawn margin on both sides
        min_side = 2 * (INITIAL_RADIUS + SPAWN_MARGIN)
        if min(self.width, self.height) <= min_side:
            raise ValueError(
                f"Window {self.width}x{self.height} is too small for the initial ball "
                f"(both sides must exceed {min_side:g})."
            )

    @property
    def interval(self) -> float:
        """Time between two simulation steps in seconds."""
        return 1.0 / self.update_rate
