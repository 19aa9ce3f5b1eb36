import json
import shutil
import tempfile
import unittest
from pathlib import Path

from printshop.snapshots import write_json_to_file


class TestWriteJsonToFile(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_creates_parents_and_pretty_prints(self):
        path = self.tmp / "static" / "data" / "products.json"
        data = {"products": [{"id": "001", "title": "Citrons à l'eau"}]}

        write_json_to_file(data, path)

        text = path.read_text(encoding="utf-8")
        self.assertEqual(json.loads(text), data)
        self.assertIn('\n  "products"', text)
        self.assertIn("Citrons à l'eau", text)

    def test_overwrites(self):
        path = self.tmp / "p.json"
        write_json_to_file([1], path)
        write_json_to_file([2], path)
        self.assertEqual(json.loads(path.read_text(encoding="utf-8")), [2])


if __name__ == "__main__":
    unittest.main()
