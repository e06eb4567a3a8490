"""
Color Chooser - Main Window

PySide6 main window: pointer-driven color surface, mode menus and the
timer that ticks the picker state.
"""

import traceback
from PySide6 import QtWidgets, QtCore, QtGui

from core.color_model import Notation
from core.fader import AxisMode
from core.state import PickerState, TICK_INTERVAL_MS
from .widgets import ColorSurface, ModeMenus


def _next(enum_cls, current):
    members = list(enum_cls)
    return members[(members.index(current) + 1) % len(members)]


class MainWindow(QtWidgets.QMainWindow):
    """
    Main application window for the color chooser.

    Moving the pointer picks a color, the background fades toward it, and
    a left click copies it to the clipboard.
    """

    def __init__(self, state=None, interval_ms=TICK_INTERVAL_MS, clipboard=None, verbose=True):
        super().__init__()
        self.setWindowTitle("Color chooser")
        self.resize(600, 300)
        self.verbose = verbose

        # Core State
        self.state = state if state is not None else PickerState()
        if clipboard is not None:
            self.state.copy_to_clipboard = clipboard
        elif self.state.copy_to_clipboard is None:
            self.state.copy_to_clipboard = QtGui.QGuiApplication.clipboard().setText

        # Build UI
        self._setup_ui()

        # Connect signals
        self._connect_signals()

        # Tick timer
        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self._tick)

    def _setup_ui(self):
        """Create the surface and menus."""
        self.surface = ColorSurface()
        self.setCentralWidget(self.surface)

        self.menus = ModeMenus(
            self.menuBar(),
            axis=self.state.axis_mode,
            display=self.state.display_notation,
            copy=self.state.copy_notation,
            parent=self,
        )
        # Created up front so the surface keeps one height for the session
        self.status = self.statusBar()
        self.surface.set_text(self.state.current_display_string())

    def _connect_signals(self):
        """Connect UI signals to slots."""
        self.surface.pointer_moved.connect(self.state.report_pointer_moved)
        self.surface.primary_clicked.connect(self._on_copy)
        self.menus.axis_selected.connect(self._on_axis_selected)
        self.menus.display_selected.connect(self._on_display_selected)
        self.menus.copy_selected.connect(self._on_copy_selected)

    def _log(self, message):
        if self.verbose:
            print(message)

    def showEvent(self, event):
        """Start ticking once the window is shown."""
        super().showEvent(event)
        if not self.timer.isActive():
            self.timer.start()

    def _tick(self):
        """One tick, called by the timer."""
        try:
            width = self.surface.width()
            height = self.surface.height()
            if width > 0 and height > 0:
                self.state.tick(width, height)
            else:
                # No geometry yet: keep the sample pending, still fade
                self.state.advance_fade()

            self.surface.set_background(self.state.current_background_color())
            self.surface.set_text(self.state.current_display_string())

        except Exception as e:
            print(f"Tick Error: {e}")
            traceback.print_exc()

    # ─────────────────────────────────────────────────────────────────────────
    # UI Event Handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _on_axis_selected(self, mode):
        self.state.set_axis_mode(mode)
        self._log(f"Axis mode: {mode.label}")

    def _on_display_selected(self, notation):
        self.state.set_display_notation(notation)
        self.surface.set_text(self.state.current_display_string())
        self._log(f"Display notation: {notation.label}")

    def _on_copy_selected(self, notation):
        self.state.set_copy_notation(notation)
        self._log(f"Copy notation: {notation.label}")

    def _on_copy(self):
        text = self.state.report_primary_click()
        self.status.showMessage(f"Copied {text}", 2000)
        self._log(f"Copied {text} to clipboard")

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts."""
        key = event.key()

        if key == QtCore.Qt.Key_X:
            self._on_axis_selected(AxisMode.X)
            self.menus.show_axis(AxisMode.X)

        elif key == QtCore.Qt.Key_Y:
            self._on_axis_selected(AxisMode.Y)
            self.menus.show_axis(AxisMode.Y)

        elif key == QtCore.Qt.Key_B:
            self._on_axis_selected(AxisMode.BOTH)
            self.menus.show_axis(AxisMode.BOTH)

        elif key == QtCore.Qt.Key_D:
            notation = _next(Notation, self.state.display_notation)
            self._on_display_selected(notation)
            self.menus.show_display(notation)

        elif key == QtCore.Qt.Key_C:
            notation = _next(Notation, self.state.copy_notation)
            self._on_copy_selected(notation)
            self.menus.show_copy(notation)

        elif key == QtCore.Qt.Key_Space:
            self._on_copy()

        else:
            super().keyPressEvent(event)
