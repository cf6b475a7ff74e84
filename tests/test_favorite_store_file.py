import json
import tempfile
import unittest
from pathlib import Path

from city_weather.favorite_store.file import JsonFileFavoriteCityStore


class TestJsonFileFavoriteCityStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "prefs" / "favorites.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_save_get_clear_round_trip(self):
        store = JsonFileFavoriteCityStore(self.path)
        self.assertIsNone(store.get())
        store.save("Tokyo")
        self.assertEqual(store.get(), "Tokyo")
        store.clear()
        self.assertIsNone(store.get())

    def test_value_survives_new_instance(self):
        JsonFileFavoriteCityStore(self.path).save("Lisbon")
        self.assertEqual(JsonFileFavoriteCityStore(self.path).get(), "Lisbon")
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"favoriteCityKey": "Lisbon"})

    def test_other_keys_are_preserved(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        store = JsonFileFavoriteCityStore(self.path)
        store.save("Tokyo")
        store.clear()
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"theme": "dark"})

    def test_corrupt_file_reads_as_empty_and_is_overwritten(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("not-json", encoding="utf-8")
        store = JsonFileFavoriteCityStore(self.path)
        self.assertIsNone(store.get())
        store.save("Tokyo")
        self.assertEqual(store.get(), "Tokyo")

    def test_non_string_value_is_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"favoriteCityKey": 12}), encoding="utf-8")
        self.assertIsNone(JsonFileFavoriteCityStore(self.path).get())

    def test_custom_key(self):
        store = JsonFileFavoriteCityStore(self.path, key="homeCity")
        store.save("Cairo")
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"homeCity": "Cairo"})

    def test_unwritable_location_is_swallowed(self):
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileFavoriteCityStore(blocker / "favorites.json")
        store.save("Tokyo")
        self.assertIsNone(store.get())


if __name__ == "__main__":
    unittest.main()
