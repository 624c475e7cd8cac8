"""Unit tests for the speed selector overlay."""

import pytest
from PyQt5.QtCore import QSize

from core.speed_level import SpeedLevel
from widgets.speed_widget import SpeedWidget


@pytest.fixture
def widget(qapp):
    w = SpeedWidget(button_size=(80, 30))
    yield w
    w.deleteLater()


def _state(widget):
    return [(b.isEnabled(), b.isHidden(), b.size()) for b in widget.buttons()]


class TestSpeedWidget:

    def test_starts_hidden_and_disabled(self, widget):
        assert widget.selector_visible is False
        assert len(widget.buttons()) == 4
        for button in widget.buttons():
            assert not button.isEnabled()
            assert button.isHidden()
            assert button.size() == QSize(80, 30)

    def test_toggle_shows_and_enables(self, widget):
        seen = []
        widget.visibilityChanged.connect(seen.append)

        widget.toggle_visibility()

        assert seen == [True]
        assert widget.selector_visible is True
        for button in widget.buttons():
            assert button.isEnabled()
            assert not button.isHidden()
            assert button.size() == QSize(80, 30)

    def test_double_toggle_restores_state(self, widget):
        before = _state(widget)
        widget.toggle_visibility()
        widget.toggle_visibility()
        assert widget.selector_visible is False
        assert _state(widget) == before

    def test_toggle_resets_size(self, widget):
        widget.buttons()[0].setFixedSize(10, 10)
        widget.toggle_visibility()
        assert widget.buttons()[0].size() == QSize(80, 30)

    def test_buttons_request_speeds(self, widget):
        requested = []
        widget.speedRequested.connect(requested.append)
        widget.toggle_visibility()

        for button in widget.buttons():
            button.click()

        assert requested == [
            SpeedLevel.PAUSED,
            SpeedLevel.SLOW,
            SpeedLevel.NORMAL,
            SpeedLevel.FAST,
        ]

    def test_hidden_buttons_do_not_request(self, widget):
        requested = []
        widget.speedRequested.connect(requested.append)
        widget.buttons()[2].click()
        assert requested == []

    def test_toggle_shortcut_bound(self, widget):
        widget.toggle_shortcut.activated.emit()
        assert widget.selector_visible is True
