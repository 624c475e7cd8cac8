"""
Callback categories and the marker interfaces a callback's owner must
satisfy before it can be registered for speed notifications.

Qt classes are registered against the markers as virtual subclasses, so a
plain ``QProgressBar`` or ``QLabel`` qualifies without any changes. Game
classes that are not Qt widgets (audio players, custom bodies) subclass the
marker directly.
"""

from abc import ABC
from enum import Enum

from PyQt5.QtCore import QAbstractAnimation
from PyQt5.QtWidgets import (
    QAbstractButton,
    QGraphicsObject,
    QGraphicsPixmapItem,
    QLabel,
    QLCDNumber,
    QProgressBar,
)


class UnknownCategoryError(ValueError):
    """Raised when a name does not match any callback category."""


class Category(Enum):
    CHARACTER = "character"
    ANIMATION = "animation"
    GUI = "gui"
    UI = "ui"
    SFX = "sfx"
    SOUNDTRACK = "soundtrack"

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownCategoryError(f"Unknown callback category: {name!r}") from None


class ScalableCharacter(ABC):
    """Physics-driven character bodies and 2D sprites."""


class ScalableAnimation(ABC):
    """Animation players."""


class ScalableGui(ABC):
    """Progress bars and timer displays."""


class ScalableUi(ABC):
    """Buttons, texture displays and labels."""


class ScalableAudio(ABC):
    """Audio stream players, for both sound effects and soundtrack."""


ScalableCharacter.register(QGraphicsObject)
ScalableCharacter.register(QGraphicsPixmapItem)
ScalableAnimation.register(QAbstractAnimation)
ScalableGui.register(QProgressBar)
ScalableGui.register(QLCDNumber)
ScalableUi.register(QAbstractButton)
ScalableUi.register(QLabel)  # QLabel also serves as the texture display

_MARKERS = {
    Category.CHARACTER: ScalableCharacter,
    Category.ANIMATION: ScalableAnimation,
    Category.GUI: ScalableGui,
    Category.UI: ScalableUi,
    Category.SFX: ScalableAudio,
    Category.SOUNDTRACK: ScalableAudio,
}


def marker_for(category):
    return _MARKERS[Category.parse(category)]


def accepts(category, target) -> bool:
    return isinstance(target, marker_for(category))
