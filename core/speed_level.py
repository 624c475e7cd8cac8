from enum import IntEnum


class SpeedLevel(IntEnum):
    """Discrete game speeds. The code is twice the time-scale multiplier."""

    PAUSED = 0
    SLOW = 1
    NORMAL = 2
    FAST = 4

    @property
    def multiplier(self) -> float:
        return self.value / 2

    @property
    def label(self) -> str:
        if self is SpeedLevel.PAUSED:
            return "Pause"
        return f"{self.multiplier:g}×"
