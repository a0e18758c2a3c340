from __future__ import annotations

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QSlider, QCheckBox
from PySide6.QtCore import Qt, Signal

from bouncingball.config import MIN_SPEED, MAX_SPEED, MIN_RADIUS, max_radius_for


class ControlPanel(QWidget):
    """Pause checkbox plus the speed and radius sliders, laid out in one row."""
    pause_toggled = Signal(bool)
    speed_changed = Signal(int)
    radius_changed = Signal(int)

    def __init__(self, speed: float, radius: float, width: int, height: int,
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)

        # --- Pause ---
        layout.addWidget(QLabel("Pause"))
        self.chk_pause = QCheckBox()
        self.chk_pause.toggled.connect(self.pause_toggled)
        layout.addWidget(self.chk_pause)

        # --- Speed ---
        layout.addWidget(QLabel("Speed"))
        self.slider_speed = QSlider(Qt.Horizontal)
        self.slider_speed.setRange(MIN_SPEED, MAX_SPEED)
        self.slider_speed.setValue(int(speed))
        # Emit only once the handle is released
        self.slider_speed.setTracking(False)
        self.slider_speed.valueChanged.connect(self.speed_changed)
        layout.addWidget(self.slider_speed)

        # --- Radius ---
        layout.addWidget(QLabel("Ball Radius"))
        self.slider_radius = QSlider(Qt.Horizontal)
        self.slider_radius.setRange(MIN_RADIUS, max(MIN_RADIUS, max_radius_for(width, height)))
        self.slider_radius.setValue(int(radius))
        self.slider_radius.setTracking(False)
        self.slider_radius.valueChanged.connect(self.radius_changed)
        layout.addWidget(self.slider_radius)

    def set_paused(self, paused: bool) -> None:
        """Sync the checkbox with a pause toggled elsewhere, without re-emitting."""
        self.chk_pause.blockSignals(True)
        self.chk_pause.setChecked(paused)
        self.chk_pause.blockSignals(False)

    def set_radius_limit(self, width: int, height: int) -> None:
        """Shrink or grow the radius range to what fits the canvas."""
        upper = max(MIN_RADIUS, max_radius_for(width, height))
        if upper != self.slider_radius.maximum():
            # A clamped value is emitted and shrinks the ball with it
            self.slider_radius.setMaximum(upper)
