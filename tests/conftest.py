"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole run."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock(qapp):
    from core.global_ctrl import GlobalController
    return GlobalController()


@pytest.fixture
def speed_ctrl(clock):
    from core.speed_ctrl import SpeedController
    return SpeedController(clock)
