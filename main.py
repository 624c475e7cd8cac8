import logging
import sys

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import (
    QApplication,
    QGraphicsScene,
    QGraphicsView,
    QMainWindow,
    QShortcut,
    QVBoxLayout,
    QWidget,
)

from core import settings
from core.frame_ticker import FrameTicker
from core.global_ctrl import GlobalController
from core.speed_ctrl import SpeedController
from core.speed_level import SpeedLevel
from widgets.demo_scene import (
    AudioStandIn,
    DayProgressBar,
    DriftingSprite,
    PulseAnimation,
    SpeedLabel,
)
from widgets.speed_widget import SpeedWidget


class MainWindow(QMainWindow):
    """Demo window: a scene whose objects follow the game speed."""

    def __init__(self, global_ctrl=None):
        super().__init__()
        self.setWindowTitle("Game Speed Control")
        self.resize(960, 540)

        self.global_ctrl = global_ctrl or GlobalController()
        self.speed_ctrl = SpeedController(self.global_ctrl)
        self.ticker = FrameTicker(self.speed_ctrl, parent=self)

        self._build_ui()
        self._register_callbacks()
        self._connect_signals()
        self._bind_shortcuts()

        self.speed_ctrl.reset()

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.speed_widget = SpeedWidget()
        layout.addWidget(self.speed_widget)

        self.scene = QGraphicsScene(0, 0, 640, 240)
        self.view = QGraphicsView(self.scene)
        layout.addWidget(self.view, 1)

        self.sprite = DriftingSprite(span=(0.0, 600.0))
        self.sprite.setPos(0, 100)
        self.scene.addItem(self.sprite)
        self.pulse = PulseAnimation(self.global_ctrl, self.sprite, parent=self)

        self.day_bar = DayProgressBar()
        layout.addWidget(self.day_bar)

        self.status_label = SpeedLabel()
        layout.addWidget(self.status_label)

        self.sfx = AudioStandIn("sfx")
        self.soundtrack = AudioStandIn("soundtrack")

    def _register_callbacks(self):
        self.speed_ctrl.register_character_callback(self.sprite.on_speed_changed)
        self.speed_ctrl.register_animation_callback(self.pulse.on_speed_changed)
        self.speed_ctrl.register_gui_callback(self.day_bar.on_speed_changed)
        self.speed_ctrl.register_ui_callback(self.status_label.on_speed_changed)
        self.speed_ctrl.register_sfx_callback(self.sfx.on_speed_changed)
        self.speed_ctrl.register_soundtrack_callback(self.soundtrack.on_speed_changed)

    def _connect_signals(self):
        self.speed_widget.speedRequested.connect(self.speed_ctrl.set_speed)
        self.ticker.tick.connect(self.sprite.advance_frame)
        self.ticker.tick.connect(self.day_bar.advance_frame)

    def _bind_shortcuts(self):
        bindings = [
            (settings.PAUSE_KEY, self.speed_ctrl.pause),
            (settings.SLOW_KEY, lambda: self.speed_ctrl.set_speed(SpeedLevel.SLOW)),
            (settings.NORMAL_KEY, lambda: self.speed_ctrl.set_speed(SpeedLevel.NORMAL)),
            (settings.FAST_KEY, lambda: self.speed_ctrl.set_speed(SpeedLevel.FAST)),
            (settings.DEBUG_KEY, self.speed_ctrl.debug_print_status),
        ]
        self._shortcuts = []
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def start(self):
        self.pulse.start()
        self.ticker.start()


def main():
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    window.start()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
