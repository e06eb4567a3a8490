"""
Tests for command line parsing in main.py.
"""

import unittest

from core.color_model import Notation
from core.fader import AxisMode

try:
    import main
except ImportError:  # pragma: no cover
    main = None


@unittest.skipIf(main is None, "PySide6 not available")
class TestCommandLine(unittest.TestCase):

    def test_defaults(self):
        args = main.build_parser().parse_args([])
        self.assertEqual(args.interval, 10)
        self.assertEqual(args.size, (600, 300))
        self.assertFalse(args.quiet)

        state = main.build_state(args)
        self.assertIs(state.axis_mode, AxisMode.X)
        self.assertIs(state.display_notation, Notation.HEX)
        self.assertIs(state.copy_notation, Notation.HEX)

    def test_modes(self):
        args = main.build_parser().parse_args(["--axis", "both", "--display", "hsl", "--copy", "rgb"])
        state = main.build_state(args)
        self.assertIs(state.axis_mode, AxisMode.BOTH)
        self.assertIs(state.display_notation, Notation.HSL)
        self.assertIs(state.copy_notation, Notation.RGB)

    def test_size(self):
        args = main.build_parser().parse_args(["--size", "800X400"])
        self.assertEqual(args.size, (800, 400))

    def test_rejects_bad_values(self):
        parser = main.build_parser()
        for argv in (["--interval", "0"], ["--size", "800"], ["--size", "0x10"], ["--axis", "z"]):
            with self.assertRaises(SystemExit):
                parser.parse_args(argv)


if __name__ == "__main__":
    unittest.main(verbosity=2)
