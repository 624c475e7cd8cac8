from PyQt5.QtCore import QObject, pyqtSignal

_EPSILON = 1e-3


class GlobalController(QObject):
    """
    Engine clock: the single time scale every animation and timer in the
    scene runs at. ``timeScaleChanged`` fires once per effective change,
    carrying the new scale; 0.0 means the clock is stopped.
    """

    timeScaleChanged = pyqtSignal(float)

    def __init__(self, time_scale: float = 1.0):
        super().__init__()
        self._time_scale = float(time_scale)

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @property
    def paused(self) -> bool:
        return self._time_scale < _EPSILON

    def set_time_scale(self, value: float):
        value = float(value)
        if abs(value - self._time_scale) <= _EPSILON:
            return
        self._time_scale = value
        self.timeScaleChanged.emit(value)

    def scale_duration(self, base_ms: int) -> int:
        """
        Wall-clock length of an animation authored at ``base_ms`` for real
        time. A stopped clock leaves it untouched; pausing is up to the
        animation.
        """
        if self.paused:
            return base_ms
        return max(1, int(base_ms / self._time_scale))
