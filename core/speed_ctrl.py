import logging
import sys
from typing import Callable, Dict, List

from PyQt5.QtCore import QObject, pyqtSignal

from core.capabilities import Category, UnknownCategoryError, accepts
from core.global_ctrl import GlobalController
from core.speed_level import SpeedLevel

logger = logging.getLogger(__name__)

SpeedCallback = Callable[[float], None]


class SpeedController(QObject):
    """
    Maps a discrete speed selection to a time-scale multiplier, pushes it
    into the global clock and fans the change out to registered callbacks.

    Callbacks are kept per category in registration order and are invoked
    with the new multiplier as their only argument.
    """

    speedChanged = pyqtSignal(float)

    def __init__(self, clock: GlobalController):
        super().__init__()
        self.clock = clock
        self.current_speed = 1.0
        self.last_speed = 0.0  # last non-paused multiplier
        self.paused = False
        self._callbacks: Dict[Category, List[SpeedCallback]] = {
            category: [] for category in Category
        }

    # ---------- Speed ----------

    def set_speed(self, level):
        if level != SpeedLevel.PAUSED:
            self.last_speed = level / 2
        self.current_speed = level / 2
        self.paused = self.current_speed == 0
        logger.debug("Speed set to %s (%.2f×)", level, self.current_speed)
        self._publish()

    def pause(self):
        self.current_speed = float(SpeedLevel.PAUSED)
        self.paused = True
        logger.debug("Paused (last speed %.2f×)", self.last_speed)
        self._publish()

    def resume(self):
        self.current_speed = self.last_speed
        self.paused = self.current_speed == 0
        logger.debug("Resumed at %.2f×", self.current_speed)
        self._publish()

    def reset(self):
        self.set_speed(SpeedLevel.NORMAL)

    def scaled_delta(self, delta: float) -> float:
        return delta * self.current_speed

    def _publish(self):
        # the clock follows current_speed even when a callback raises
        try:
            self._emit_speed_changed()
        finally:
            self._apply()

    def _apply(self):
        self.clock.set_time_scale(self.current_speed)

    # ---------- Registration ----------

    def register_character_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.CHARACTER, callback)

    def register_animation_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.ANIMATION, callback)

    def register_gui_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.GUI, callback)

    def register_ui_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.UI, callback)

    def register_sfx_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.SFX, callback)

    def register_soundtrack_callback(self, callback: SpeedCallback) -> bool:
        return self._register(Category.SOUNDTRACK, callback)

    def _register(self, category: Category, callback: SpeedCallback) -> bool:
        target = getattr(callback, "__self__", None)
        if target is None:
            logger.error(
                "Rejected %s callback %r: it is not bound to an object",
                category.value,
                callback,
            )
            return False
        if not accepts(category, target):
            logger.error(
                "Rejected %s callback %s: %s is not a valid %s target",
                category.value,
                _describe(callback),
                type(target).__name__,
                category.value,
            )
            return False
        self._callbacks[category].append(callback)
        logger.debug("Registered %s callback %s", category.value, _describe(callback))
        return True

    def callbacks(self, category):
        return tuple(self._callbacks[Category.parse(category)])

    # ---------- Notification ----------

    def _emit_speed_changed(self, categories=None):
        """
        Broadcast ``speedChanged`` then call every callback of the named
        categories (all of them by default) in registration order.
        """
        self.speedChanged.emit(self.current_speed)
        for category in self._resolve_categories(categories):
            for callback in self._callbacks[category]:
                callback(self.current_speed)

    @staticmethod
    def _resolve_categories(categories):
        if categories is None:
            return list(Category)
        if isinstance(categories, (str, Category)):
            categories = [categories]
        resolved = []
        for name in categories:
            try:
                category = Category.parse(name)
            except UnknownCategoryError as exc:
                logger.error("%s; skipping", exc)
                continue
            if category not in resolved:
                resolved.append(category)
        return resolved

    # ---------- Diagnostics ----------

    def status_report(self) -> str:
        lines = [
            "Speed controller status",
            f"  current speed: {self.current_speed:g}",
            f"  last speed: {self.last_speed:g}",
        ]
        for category in Category:
            entries = self._callbacks[category]
            lines.append(f"  {category.value}: {len(entries)} callback(s)")
            for callback in entries:
                lines.append(f"    - {_describe(callback)}")
        return "\n".join(lines)

    def debug_print_status(self, stream=None):
        print(self.status_report(), file=stream or sys.stdout)


def _describe(callback) -> str:
    owner = getattr(callback, "__self__", None)
    name = getattr(callback, "__name__", repr(callback))
    if owner is None:
        return name
    return f"{type(owner).__name__}.{name}"
