"""
Main Application Window
=======================
The primary GUI container that holds the drawing canvas and the control row.

Why is this file needed?
------------------------
1. Layout: Canvas in the center, controls along the bottom.
2. Routing: It connects the controls to the World and the simulation worker
   to the canvas, and stops the worker when the window closes.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QMessageBox
from PySide6.QtGui import QAction, QCloseEvent

from bouncingball.config import AppConfig, WINDOW_TITLE
from bouncingball.controller.workers import SimulationWorker
from bouncingball.model.state import World
from bouncingball.view.widgets.canvas import BallCanvas
from bouncingball.view.widgets.control_panel import ControlPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, world: World, config: AppConfig) -> None:
        super().__init__()
        self.world: World = world
        self.config: AppConfig = config

        self.setWindowTitle(WINDOW_TITLE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. CANVAS ---
        self.canvas = BallCanvas(world, config.width, config.height)
        main_layout.addWidget(self.canvas, 1)

        # --- 2. CONTROLS ---
        self.controls = ControlPanel(
            speed=world.get_speed(),
            radius=world.snapshot().radius,
            width=config.width,
            height=config.height,
        )
        main_layout.addWidget(self.controls)

        # --- 3. SIMULATION THREAD ---
        self.worker = SimulationWorker(world, rate=config.update_rate)

        # --- SIGNAL CONNECTIONS ---
        self.controls.pause_toggled.connect(self.on_pause_toggled)
        self.controls.speed_changed.connect(self.on_speed_changed)
        self.controls.radius_changed.connect(self.on_radius_changed)
        self.canvas.resized.connect(self.controls.set_radius_limit)
        self.worker.frame_ready.connect(self.canvas.set_snapshot)
        self.worker.error_occurred.connect(self.on_error)

        # --- ACTIONS ---
        self.act_pause = QAction("Pause / Resume", self)
        self.act_pause.setShortcut("P")
        self.act_pause.triggered.connect(self.on_pause_shortcut)
        self.addAction(self.act_pause)

    def start(self) -> None:
        """Start the ball bouncing."""
        self.worker.start()

    # --- SLOTS ---
    def on_pause_toggled(self, paused: bool) -> None:
        self.world.set_paused(paused)

    def on_pause_shortcut(self) -> None:
        paused = self.world.toggle_paused()
        self.controls.set_paused(paused)
        logger.debug("Animation paused." if paused else "Animation resumed.")

    def on_speed_changed(self, speed: int) -> None:
        logger.debug(f"Speed set to {speed}")
        self.world.set_speed(speed)
        self.canvas.refresh()

    def on_radius_changed(self, radius: int) -> None:
        logger.debug(f"Radius set to {radius}")
        self.world.set_radius(radius)
        # The worker does not emit frames while paused
        self.canvas.refresh()

    def on_error(self, msg: str) -> None:
        QMessageBox.critical(self, "Simulation Error", msg)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.worker.stop()
        super().closeEvent(event)
