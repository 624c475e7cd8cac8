from PyQt5.QtCore import QElapsedTimer, QObject, QTimer, pyqtSignal

from core import settings


class FrameTicker(QObject):
    """
    Drives per-frame updates from a QTimer and emits the time-scaled delta
    (seconds) of every frame.
    """

    tick = pyqtSignal(float)

    def __init__(self, speed_ctrl, interval_ms=None, parent=None):
        super().__init__(parent)
        self.speed_ctrl = speed_ctrl
        self._elapsed = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(
            settings.FRAME_INTERVAL_MS if interval_ms is None else interval_ms
        )
        self._timer.timeout.connect(self._on_timeout)

    def start(self):
        self._elapsed.start()
        self._timer.start()

    def stop(self):
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def step(self, delta: float) -> float:
        scaled = self.speed_ctrl.scaled_delta(delta)
        self.tick.emit(scaled)
        return scaled

    def _on_timeout(self):
        # restart() returns the ms elapsed since the previous frame
        self.step(self._elapsed.restart() / 1000.0)
