"""
Simulation Loop
===============
Fixed-rate timing loop that drives the World.

Why is this file needed?
------------------------
1. Cadence: It wakes up `rate` times per second, steps the ball and hands the
   new snapshot to a redraw callback.
2. Shutdown: `stop()` wakes the loop immediately so the thread can be joined
   at program exit or at the end of a test.

Note: This module should be pure Python and should NOT import PySide6.
The Qt thread wrapper lives in `controller.workers`.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from bouncingball.config import UPDATE_RATE
from bouncingball.model.state import World, WorldSnapshot

logger = logging.getLogger(__name__)

FrameCallback = Callable[[WorldSnapshot], None]


class SimulationLoop:
    def __init__(self, world: World, on_frame: Optional[FrameCallback] = None,
                 rate: float = UPDATE_RATE, clock: Callable[[], float] = time.monotonic) -> None:
        if rate <= 0:
            raise ValueError(f"Update rate must be positive, got {rate}.")
        self.world = world
        self.on_frame = on_frame
        self.interval = 1.0 / rate
        self._clock = clock
        self._stop_event = threading.Event()
        self.ticks = 0

    @property
    def is_running(self) -> bool:
        return not self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Run until `stop()` is called or `max_ticks` ticks have elapsed.

        A tick is one wake-up: the world is stepped unless paused, and the
        frame callback fires only when the ball actually moved. Returns the
        number of ticks performed by this call.
        """
        logger.info(f"Simulation loop started ({1.0 / self.interval:g} Hz).")
        done = 0
        next_deadline = self._clock() + self.interval

        while not self._stop_event.is_set():
            if max_ticks is not None and done >= max_ticks:
                break

            # Sleep until the deadline; returns early on stop()
            if self._stop_event.wait(max(0.0, next_deadline - self._clock())):
                break

            if self.world.tick() and self.on_frame is not None:
                self.on_frame(self.world.snapshot())

            done += 1
            self.ticks += 1

            next_deadline += self.interval
            now = self._clock()
            if now - next_deadline > self.interval:
                # Fell behind by more than a frame: re-anchor instead of bursting
                logger.debug(f"Simulation loop behind by {now - next_deadline:.3f}s, skipping ahead.")
                next_deadline = now + self.interval

        logger.info(f"Simulation loop stopped after {done} ticks.")
        return done
