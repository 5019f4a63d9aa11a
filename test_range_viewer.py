import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import range_viewer


class RangeViewerTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.env = mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(self.tmp)})
        self.env.start()

    def tearDown(self):
        self.env.stop()
        self._tmp.cleanup()

    def _run(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = range_viewer.run(argv)
        return code, out.getvalue()

    def test_missing_config_file(self):
        code, out = self._run(["-c", str(self.tmp / "missing.toml")])
        self.assertEqual(code, 1)
        self.assertIn("Configuration file not found", out)

    def test_default_run_prints_window_query(self):
        code, out = self._run([])
        self.assertEqual(code, 0)
        self.assertIn("Structure: range2d", out)
        self.assertIn("Points returned:", out)

    def test_config_file_and_overrides(self):
        path = self.tmp / "range-trees.toml"
        path.write_text('[General]\nstructure = "interval"\n[Generator]\ncount = 5\n')
        code, out = self._run(["-c", str(path), "--line", "10", "0", "40"])
        self.assertEqual(code, 0)
        self.assertIn("Structure: interval", out)
        self.assertIn("x = 10, y in [0, 40]", out)

        args = range_viewer.parse_args(["-c", str(path), "-s", "segment", "--seed", "3",
                                        "--window", "1", "2", "3", "4"])
        config = range_viewer.load_config(args)
        self.assertEqual(config.structure, "segment")
        self.assertEqual(config.generator.seed, 3)
        self.assertEqual(config.generator.count, 5)
        self.assertEqual(config.query.window, (1, 2, 3, 4))

    def test_impossible_input_is_reported(self):
        code, out = self._run(["--count", "100"])
        self.assertEqual(code, 1)
        self.assertIn("Error:", out)


if __name__ == '__main__':
    unittest.main()
