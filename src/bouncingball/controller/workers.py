"""
Background Workers (Threading)
==============================
This module contains the QThread subclass that runs the animation.

Why is this file needed?
------------------------
1. Responsiveness: The timing loop sleeps between steps; running it on the
   main thread would freeze the GUI. This class pushes it to a background thread.
2. Signals: Frames reach the canvas through a Qt Signal, which Qt queues onto
   the GUI thread, so widgets are never touched from the worker.

Classes:
    SimulationWorker: Runs the SimulationLoop.
"""
import logging
from PySide6.QtCore import QThread, Signal

from bouncingball.config import UPDATE_RATE
from bouncingball.controller.loop import SimulationLoop
from bouncingball.model.state import World, WorldSnapshot

logger = logging.getLogger(__name__)


class SimulationWorker(QThread):
    # Signals to update the UI from the background
    frame_ready = Signal(object)  # WorldSnapshot
    error_occurred = Signal(str)

    def __init__(self, world: World, rate: int = UPDATE_RATE) -> None:
        super().__init__()
        self.world = world
        self.loop = SimulationLoop(world, on_frame=self._emit_frame, rate=rate)

    def _emit_frame(self, snapshot: WorldSnapshot) -> None:
        self.frame_ready.emit(snapshot)

    def run(self) -> None:
        try:
            logger.info("Starting simulation in background thread...")
            self.loop.run()
        except Exception as e:
            logger.exception("Error in SimulationWorker")
            self.error_occurred.emit(str(e))

    def stop(self, timeout_ms: int = 1000) -> None:
        """Ask the loop to finish and wait for the thread to exit."""
        self.loop.stop()
        if self.isRunning() and not self.wait(timeout_ms):
            logger.warning("Simulation thread did not stop in time.")
