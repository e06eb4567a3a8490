from PySide6 import QtWidgets, QtCore, QtGui

from core.color_model import BLACK, Notation, to_hex
from core.fader import AxisMode


class ColorSurface(QtWidgets.QWidget):
    """
    Central widget: paints the faded background and shows the color text.

    Reports pointer moves (mouse tracking, no button needed) and primary
    button clicks in its own coordinates.
    """
    pointer_moved = QtCore.Signal(int, int)
    primary_clicked = QtCore.Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setAutoFillBackground(True)
        self.setMinimumSize(200, 100)
        self._press_pos = None

        layout = QtWidgets.QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        font = QtGui.QFont("Andale Mono", 40)
        font.setStyleHint(QtGui.QFont.Monospace)

        self.label = QtWidgets.QLabel(to_hex(BLACK))
        self.label.setFont(font)
        self.label.setStyleSheet("color: white;")
        self.label.setAlignment(QtCore.Qt.AlignCenter)
        # Let moves and clicks over the text reach the surface
        self.label.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents)
        layout.addWidget(self.label, 0, 0, QtCore.Qt.AlignCenter)

        self.set_background(BLACK)

    def set_background(self, color):
        pal = self.palette()
        pal.setColor(QtGui.QPalette.Window, QtGui.QColor(color.red, color.green, color.blue))
        self.setPalette(pal)

    def set_text(self, text):
        if self.label.text() != text:
            self.label.setText(text)

    def text(self):
        return self.label.text()

    def mouseMoveEvent(self, event):
        pos = event.position()
        self.pointer_moved.emit(int(pos.x()), int(pos.y()))
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self._press_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        press_pos, self._press_pos = self._press_pos, None
        if event.button() == QtCore.Qt.LeftButton and press_pos is not None:
            pos = event.position().toPoint()
            # A drag is not a click
            moved = (pos - press_pos).manhattanLength()
            if moved < QtWidgets.QApplication.startDragDistance() and self.rect().contains(pos):
                self.primary_clicked.emit()
        super().mouseReleaseEvent(event)


class ModeMenus(QtCore.QObject):
    """
    Builds the Axes / Display style / Copy style menus on a menu bar.

    Each menu is an exclusive group of checkable actions; selections are
    forwarded through the signals below.
    """
    axis_selected = QtCore.Signal(object)
    display_selected = QtCore.Signal(object)
    copy_selected = QtCore.Signal(object)

    def __init__(self, menu_bar, axis=AxisMode.X, display=Notation.HEX, copy=Notation.HEX, parent=None):
        super().__init__(parent)
        self.axis_actions = self._add_menu(menu_bar, "Axes", AxisMode, axis, self.axis_selected)
        self.display_actions = self._add_menu(menu_bar, "Display style", Notation, display, self.display_selected)
        self.copy_actions = self._add_menu(menu_bar, "Copy style", Notation, copy, self.copy_selected)

    def _add_menu(self, menu_bar, title, options, current, signal):
        menu = menu_bar.addMenu(title)
        group = QtGui.QActionGroup(menu)
        group.setExclusive(True)
        actions = {}
        for option in options:
            action = menu.addAction(option.label)
            action.setCheckable(True)
            action.setChecked(option is current)
            group.addAction(action)
            action.triggered.connect(lambda checked=False, o=option: signal.emit(o))
            actions[option] = action
        return actions

    def show_axis(self, mode):
        self.axis_actions[mode].setChecked(True)

    def show_display(self, notation):
        self.display_actions[notation].setChecked(True)

    def show_copy(self, notation):
        self.copy_actions[notation].setChecked(True)
