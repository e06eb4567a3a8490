"""
Color Chooser - Main Entry Point

Move the pointer over the window to pick a color, left click to copy it.
"""
import argparse
import sys

from PySide6 import QtWidgets

from core.color_model import Notation
from core.fader import AxisMode
from core.state import PickerState, TICK_INTERVAL_MS, DEFAULT_AXIS, DEFAULT_DISPLAY, DEFAULT_COPY
from app.desktop.main_window import MainWindow

DEFAULT_SIZE = (600, 300)

_AXES = {mode.name.lower(): mode for mode in AxisMode}
_NOTATIONS = {notation.name.lower(): notation for notation in Notation}


def _positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value


def _window_size(text):
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {text!r}")
    return width, height


def build_parser():
    parser = argparse.ArgumentParser(
        prog="color-chooser",
        description="Pick a color by moving the pointer; left click copies it.",
    )
    parser.add_argument("--axis", choices=sorted(_AXES), default=DEFAULT_AXIS.name.lower(),
                        help="Pointer axis that drives the color (default: %(default)s)")
    parser.add_argument("--display", choices=sorted(_NOTATIONS), default=DEFAULT_DISPLAY.name.lower(),
                        help="Notation shown in the window (default: %(default)s)")
    parser.add_argument("--copy", choices=sorted(_NOTATIONS), default=DEFAULT_COPY.name.lower(),
                        help="Notation copied on click (default: %(default)s)")
    parser.add_argument("--interval", type=_positive_int, default=TICK_INTERVAL_MS, metavar="MS",
                        help="Milliseconds between ticks (default: %(default)s)")
    parser.add_argument("--size", type=_window_size, default=DEFAULT_SIZE, metavar="WxH",
                        help="Initial window size (default: 600x300)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    return parser


def build_state(args):
    return PickerState(
        axis_mode=_AXES[args.axis],
        display_notation=_NOTATIONS[args.display],
        copy_notation=_NOTATIONS[args.copy],
    )


def main(argv=None):
    args = build_parser().parse_args(argv)

    app = QtWidgets.QApplication(sys.argv[:1])
    window = MainWindow(state=build_state(args), interval_ms=args.interval, verbose=not args.quiet)
    window.resize(*args.size)
    window.show()

    if not args.quiet:
        print("Color chooser started.")
        print("Controls: Move the pointer to pick, Left Click to copy.")
        print("Keys 'x' / 'y' / 'b': Axis X / Y / Both.")
        print("Key 'd': Cycle display notation. Key 'c': Cycle copy notation.")
        print("Key Space: Copy current color.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
