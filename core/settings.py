"""
Application settings. Every value can be overridden with a
``GAMESPEED_<NAME>`` environment variable, read once at import.
"""

import logging
import os


def _env(name, default):
    return os.environ.get(f"GAMESPEED_{name}", default)


def _env_int(name, default):
    raw = os.environ.get(f"GAMESPEED_{name}")
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring GAMESPEED_%s=%r: not an integer", name, raw
        )
        return default


# Key bindings (QKeySequence strings)
PAUSE_KEY = _env("PAUSE_KEY", "P")
SLOW_KEY = _env("SLOW_KEY", "1")
NORMAL_KEY = _env("NORMAL_KEY", "2")
FAST_KEY = _env("FAST_KEY", "3")
DEBUG_KEY = _env("DEBUG_KEY", "F3")
TOGGLE_SELECTOR_KEY = _env("TOGGLE_SELECTOR_KEY", "Tab")

SELECTOR_BUTTON_SIZE = (
    _env_int("SELECTOR_BUTTON_WIDTH", 72),
    _env_int("SELECTOR_BUTTON_HEIGHT", 32),
)

FRAME_INTERVAL_MS = _env_int("FRAME_INTERVAL_MS", 16)  # ~60 fps

LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
