import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from .config import Config, GeneratorConfig

SAMPLE = """
[General]
structure = "segment"
debug = true

[Generator]
seed = 4
count = 12

[Query]
window = [1, 2, 30, 40]
line = [9, 0, 25]

[Viewer]
width = 640

[Colors]
reported = "#00ff00"
"""


class ConfigTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        path = self.tmp / "range-trees.toml"
        path.write_text(text)
        return path

    def test_load(self):
        config = Config.load(self._write(SAMPLE))
        self.assertEqual(config.structure, "segment")
        self.assertTrue(config.debug)
        self.assertEqual(config.generator.seed, 4)
        self.assertEqual(config.generator.count, 12)
        self.assertEqual(config.generator.limit, GeneratorConfig.limit)
        self.assertEqual(config.query.window, (1, 2, 30, 40))
        self.assertEqual(config.query.line, (9, 0, 25))
        self.assertEqual(config.viewer.width, 640)
        self.assertEqual(config.viewer.height, 800)
        self.assertEqual(config.colors.reported, "#00ff00")

    def test_missing_explicit_file(self):
        with self.assertRaises(FileNotFoundError):
            Config.load(self.tmp / "missing.toml")

    def test_missing_default_file_gives_defaults(self):
        with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(self.tmp)}):
            self.assertEqual(Config.get_default_config_path(),
                             self.tmp / "layered-range-trees" / "range-trees.toml")
            config = Config.load()
        self.assertEqual(config, Config())

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            Config.load(self._write('[General]\nstructure = "kdtree"\n'))
        with self.assertRaises(ValueError):
            Config.load(self._write('[Query]\nwindow = [1, 2, 3]\n'))


if __name__ == '__main__':
    unittest.main()
