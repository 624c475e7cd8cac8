from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QHBoxLayout, QPushButton, QShortcut, QWidget

from core import settings
from core.speed_level import SpeedLevel


class SpeedWidget(QWidget):
    """
    Overlay row of speed-selector buttons. The toggle key shows or hides
    the row; hidden buttons are also disabled so they cannot be triggered.
    """

    visibilityChanged = pyqtSignal(bool)
    speedRequested = pyqtSignal(object)  # SpeedLevel

    def __init__(self, parent=None, toggle_key=None, button_size=None):
        super().__init__(parent)
        self.selector_visible = False
        self._button_size = button_size or settings.SELECTOR_BUTTON_SIZE
        self._buttons = []

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        for level in SpeedLevel:
            button = QPushButton(level.label)
            button.setObjectName(f"speedButton{level.name.title()}")
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _checked=False, lv=level: self.speedRequested.emit(lv))
            layout.addWidget(button)
            self._buttons.append(button)
        layout.addStretch(1)

        self.visibilityChanged.connect(self._on_visibility_changed)
        self._on_visibility_changed(self.selector_visible)

        self.toggle_shortcut = QShortcut(
            QKeySequence(toggle_key or settings.TOGGLE_SELECTOR_KEY), self
        )
        self.toggle_shortcut.setContext(Qt.ApplicationShortcut)
        self.toggle_shortcut.activated.connect(self.toggle_visibility)

    def buttons(self):
        return list(self._buttons)

    def toggle_visibility(self):
        self.selector_visible = not self.selector_visible
        self.visibilityChanged.emit(self.selector_visible)

    def _on_visibility_changed(self, visible):
        width, height = self._button_size
        for button in self._buttons:
            button.setFixedSize(width, height)
            button.setDisabled(not visible)
            button.setVisible(visible)
