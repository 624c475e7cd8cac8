"""Unit tests for FrameTicker."""

import pytest

from core.frame_ticker import FrameTicker
from core.speed_level import SpeedLevel


@pytest.fixture
def ticker(speed_ctrl):
    return FrameTicker(speed_ctrl, interval_ms=10)


class TestFrameTicker:

    def test_step_emits_scaled_delta(self, ticker, speed_ctrl):
        seen = []
        ticker.tick.connect(seen.append)

        speed_ctrl.set_speed(SpeedLevel.FAST)
        assert ticker.step(0.5) == 1.0
        speed_ctrl.set_speed(SpeedLevel.SLOW)
        ticker.step(0.5)

        assert seen == [1.0, 0.25]

    def test_paused_ticks_are_zero(self, ticker, speed_ctrl):
        speed_ctrl.pause()
        assert ticker.step(0.016) == 0.0

    def test_start_stop(self, ticker):
        assert not ticker.is_running()
        ticker.start()
        assert ticker.is_running()
        ticker.stop()
        assert not ticker.is_running()

    def test_interval(self, speed_ctrl):
        from core import settings

        assert FrameTicker(speed_ctrl)._timer.interval() == settings.FRAME_INTERVAL_MS
        assert FrameTicker(speed_ctrl, interval_ms=0)._timer.interval() == 0
