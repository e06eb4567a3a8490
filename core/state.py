import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from core.color_model import BLACK, Color, Notation, format_color, position_to_color
from core.fader import AxisMode, Fader, axis_fraction

TICK_INTERVAL_MS = 10

DEFAULT_AXIS = AxisMode.X
DEFAULT_DISPLAY = Notation.HEX
DEFAULT_COPY = Notation.HEX


class PointerSample:
    """
    Last pointer position reported by the event handler.

    x, y and the pending flag are written together and read-and-cleared
    together under one lock, so the tick never sees a half-updated sample.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._x = 0
        self._y = 0
        self._pending = False

    def write(self, x, y):
        with self._lock:
            self._x = x
            self._y = y
            self._pending = True

    def consume(self):
        """Return (x, y) if a sample is pending and clear the flag, else None."""
        with self._lock:
            if not self._pending:
                return None
            self._pending = False
            return (self._x, self._y)

    @property
    def pending(self):
        with self._lock:
            return self._pending


@dataclass
class PickerState:
    """
    Holds the runtime state of the color chooser.
    Independent of UI or rendering backend.
    """
    # Mode selections (written from menus, read every tick)
    axis_mode: AxisMode = DEFAULT_AXIS
    display_notation: Notation = DEFAULT_DISPLAY
    copy_notation: Notation = DEFAULT_COPY

    # Color state
    target: Color = BLACK
    fader: Fader = field(default_factory=Fader)

    # Clipboard collaborator, called with the copied text
    copy_to_clipboard: Optional[Callable[[str], None]] = None

    pointer: PointerSample = field(default_factory=PointerSample, repr=False)

    # ─────────────────────────────────────────────────────────────────────
    # Inbound (event handlers)
    # ─────────────────────────────────────────────────────────────────────

    def report_pointer_moved(self, x, y):
        """Record a pointer sample. Safe to call from any thread."""
        self.pointer.write(x, y)

    def set_axis_mode(self, mode):
        self.axis_mode = AxisMode(mode)

    def set_display_notation(self, notation):
        self.display_notation = Notation(notation)

    def set_copy_notation(self, notation):
        self.copy_notation = Notation(notation)

    def report_primary_click(self):
        """Copy the target color in the copy notation. Returns the text."""
        text = self.copy_text()
        if self.copy_to_clipboard is not None:
            self.copy_to_clipboard(text)
        return text

    # ─────────────────────────────────────────────────────────────────────
    # Tick
    # ─────────────────────────────────────────────────────────────────────

    def update_target(self, width, height):
        """Consume a pending pointer sample into a new target color."""
        sample = self.pointer.consume()
        if sample is None:
            return False
        x, y = sample
        fraction = axis_fraction(self.axis_mode, x, y, width, height)
        self.target = position_to_color(fraction)
        return True

    def tick(self, width, height):
        """
        Advance one step: target update (if a sample is pending), then fade.

        Returns True if the target changed this tick.
        """
        changed = self.update_target(width, height)
        self.advance_fade()
        return changed

    def advance_fade(self):
        self.fader.advance(self.target)

    # ─────────────────────────────────────────────────────────────────────
    # Outbound (polled by the window)
    # ─────────────────────────────────────────────────────────────────────

    def current_display_string(self):
        return format_color(self.target, self.display_notation)

    def current_background_color(self):
        return self.fader.color

    def copy_text(self):
        return format_color(self.target, self.copy_notation)
