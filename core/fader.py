"""
Color Chooser - Pointer Mapping and Fade

Turns pointer position + window size into a scalar fraction, and smooths
the displayed background toward the target color one tick at a time.
"""
from enum import Enum

import numpy as np

from core.color_model import BLACK, Color

# Each tick the background keeps 49/50 of itself and takes 1/50 of the target
FADE_WEIGHT = 49
FADE_DIVISOR = 50


class AxisMode(Enum):
    """Which pointer coordinate(s) feed the color mapping."""
    X = "X"
    Y = "Y"
    BOTH = "Both"

    @property
    def label(self):
        return self.value


def axis_fraction(axis, x, y, width, height):
    """
    Map pointer coordinates to a fraction for `position_to_color`.

    BOTH keeps the legacy simplified formula: x / (w * h) + y / h. It is
    not a normalized blend of the two axes and exceeds 1.0 near the bottom
    edge of the window.
    """
    if axis is AxisMode.X:
        return x / width
    if axis is AxisMode.Y:
        return y / height
    if axis is AxisMode.BOTH:
        # Simplified from (y * w + x) / (w * h)
        return x / (width * height) + y / height
    raise ValueError(f"Unknown axis mode: {axis!r}")


def fade_step(current, target):
    """One exponential smoothing step on float RGB channels in [0, 1]."""
    current = np.asarray(current, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    return (current * FADE_WEIGHT + target) / FADE_DIVISOR


class Fader:
    """
    Holds the background color that is actually painted.

    The state is kept as float channels so the fade keeps closing in on the
    target; it is only rounded to 8 bits when read as a Color.
    """

    def __init__(self, start=BLACK):
        self._channels = np.array(start.unit(), dtype=np.float64)

    def advance(self, target):
        """Move 1/FADE_DIVISOR of the remaining distance toward `target`."""
        self._channels = fade_step(self._channels, target.unit())

    @property
    def channels(self):
        return self._channels.copy()

    @property
    def color(self):
        return Color.from_unit(*self._channels)
