"""Small scene objects that react to speed changes, one per callback category."""

import logging

from PyQt5.QtCore import QEasingCurve, QRectF, QVariantAnimation
from PyQt5.QtGui import QBrush, QColor, QPen
from PyQt5.QtWidgets import QGraphicsObject, QLabel, QProgressBar

from core.capabilities import ScalableAudio

logger = logging.getLogger(__name__)


class DriftingSprite(QGraphicsObject):
    """Character that drifts right at a fixed speed (px/s) and wraps around."""

    size = 36

    def __init__(self, speed_px=120.0, span=(0.0, 600.0)):
        super().__init__()
        self.speed_px = speed_px
        self.span = span
        self._color = QColor("#4fa3e0")

    def boundingRect(self):
        return QRectF(0, 0, self.size, self.size)

    def paint(self, painter, option, widget=None):
        painter.setPen(QPen(QColor("#1d3c57"), 2))
        painter.setBrush(QBrush(self._color))
        painter.drawEllipse(self.boundingRect())

    def advance_frame(self, scaled_delta: float):
        left, right = self.span
        x = self.x() + self.speed_px * scaled_delta
        if x > right:
            x = left
        self.setX(x)

    def on_speed_changed(self, scale: float):
        self._color = QColor("#9a9a9a") if scale == 0 else QColor("#4fa3e0")
        self.update()


class PulseAnimation(QVariantAnimation):
    """Looping opacity pulse whose duration follows the game speed."""

    def __init__(self, clock, target, base_ms=900, parent=None):
        super().__init__(parent)
        self.clock = clock
        self.base_ms = base_ms
        self.setStartValue(0.35)
        self.setEndValue(1.0)
        self.setEasingCurve(QEasingCurve.InOutSine)
        self.setLoopCount(-1)
        self.setDuration(clock.scale_duration(base_ms))
        self.valueChanged.connect(target.setOpacity)

    def on_speed_changed(self, scale: float):
        if scale == 0:
            if self.state() == QVariantAnimation.Running:
                self.pause()
            return
        # callbacks run before the clock is updated, so scale from the argument
        self.setDuration(max(1, int(self.base_ms / scale)))
        if self.state() == QVariantAnimation.Paused:
            self.resume()


class DayProgressBar(QProgressBar):
    """Advances by one percent per scaled second."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(0, 100)
        self._progress = 0.0

    def advance_frame(self, scaled_delta: float):
        self._progress = (self._progress + scaled_delta) % 100
        self.setValue(int(self._progress))

    def on_speed_changed(self, scale: float):
        self.setFormat("paused" if scale == 0 else "%p%")


class SpeedLabel(QLabel):
    def on_speed_changed(self, scale: float):
        self.setText("Paused" if scale == 0 else f"Speed {scale:g}×")


class AudioStandIn(ScalableAudio):
    """Records the playback rate an audio stream player would be given."""

    def __init__(self, name):
        self.name = name
        self.playback_rate = 1.0

    def on_speed_changed(self, scale: float):
        self.playback_rate = scale
        logger.debug("%s playback rate -> %.2f", self.name, scale)
