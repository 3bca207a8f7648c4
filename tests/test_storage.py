"""Tests for JsonFileStorage."""

import json
import os
import tempfile
import unittest

from channel_listings.errors import OutputWriteError
from channel_listings.models import Channel
from channel_listings.storage import JsonFileStorage


class TestJsonFileStorage(unittest.TestCase):
    """Verify the per-provider pretty-printed JSON output."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.output_dir = os.path.join(self._tmp.name, "data")

    def test_writes_pretty_printed_array(self):
        storage = JsonFileStorage(self.output_dir)
        path = storage.write("dish.json", [Channel("5", "ESPN"), Channel("6", "NICKELODEON")])

        self.assertEqual(path, os.path.join(self.output_dir, "dish.json"))
        with open(path, encoding="utf-8") as f:
            text = f.read()
        self.assertEqual(json.loads(text), [{"number": "5", "name": "ESPN"}, {"number": "6", "name": "NICKELODEON"}])
        self.assertIn('\n  {\n    "number": "5"', text)

    def test_creates_output_directory(self):
        JsonFileStorage(self.output_dir).write("sky.json", [])
        self.assertTrue(os.path.isdir(self.output_dir))

    def test_write_failure_raises_output_write_error(self):
        # A regular file where the directory should be makes every write fail.
        blocker = os.path.join(self._tmp.name, "blocker")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("x")
        storage = JsonFileStorage(blocker)
        with self.assertRaises(OutputWriteError) as ctx:
            storage.write("dish.json", [Channel("1", "A")])
        self.assertIn("dish.json", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
