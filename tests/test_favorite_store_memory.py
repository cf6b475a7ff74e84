import unittest

from city_weather.favorite_store.memory import InMemoryFavoriteCityStore


class TestInMemoryFavoriteCityStore(unittest.TestCase):
    def test_save_get_clear_round_trip(self):
        store = InMemoryFavoriteCityStore()
        self.assertIsNone(store.get())
        store.save("Tokyo")
        self.assertEqual(store.get(), "Tokyo")
        store.clear()
        self.assertIsNone(store.get())

    def test_save_overwrites(self):
        store = InMemoryFavoriteCityStore()
        store.save("Tokyo")
        store.save("Osaka")
        self.assertEqual(store.get(), "Osaka")

    def test_clear_when_empty_is_noop(self):
        store = InMemoryFavoriteCityStore()
        store.clear()
        self.assertIsNone(store.get())


if __name__ == "__main__":
    unittest.main()
