import sys
import os
import unittest

# Add root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.color_model import Color
from core.fader import AxisMode
from core.state import PickerState

class TestCore(unittest.TestCase):
    def test_state_initialization(self):
        state = PickerState()
        self.assertEqual(state.axis_mode, AxisMode.X)
        self.assertIsNone(state.copy_to_clipboard)
        print("PickerState initialized successfully.")

    def test_headless_ticks(self):
        print("Running 100 ticks without a window...")
        state = PickerState()
        state.report_pointer_moved(320, 240)
        for _ in range(100):
            state.tick(640, 480)
        self.assertEqual(state.target, Color(128, 0, 0))
        self.assertNotEqual(state.current_background_color(), state.target)
        print(f"Background after 100 ticks: {state.current_background_color()}")

if __name__ == "__main__":
    unittest.main()
