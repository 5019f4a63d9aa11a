import contextlib
import io
import unittest

from .debug import debug_print, is_debug_enabled, set_debug_enabled


class DebugTest(unittest.TestCase):
    def tearDown(self):
        set_debug_enabled(False)

    def _capture(self, tag, msg):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            debug_print(tag, msg)
        return err.getvalue()

    def test_silent_by_default(self):
        self.assertFalse(is_debug_enabled())
        self.assertEqual(self._capture("RANGE2D", "build"), "")

    def test_enabled_output_is_tagged_and_timestamped(self):
        set_debug_enabled(True)
        self.assertTrue(is_debug_enabled())
        out = self._capture("RANGE2D", "build: 3 points")
        self.assertRegex(out, r"^\[\d\d:\d\d:\d\d\] RANGE2D: build: 3 points\n$")


if __name__ == '__main__':
    unittest.main()
