import unittest

from city_weather.favorite_store.redis import RedisFavoriteCityStore


class FakeRedis:
    def __init__(self):
        self.store = {}

    def set(self, key, value):
        self.store[key] = value

    def get(self, key):
        return self.store.get(key)

    def delete(self, key):
        self.store.pop(key, None)


class BrokenRedis:
    def set(self, key, value):
        raise ConnectionError("down")

    def get(self, key):
        raise ConnectionError("down")

    def delete(self, key):
        raise ConnectionError("down")


class TestRedisFavoriteCityStore(unittest.TestCase):
    def test_round_trip(self):
        client = FakeRedis()
        store = RedisFavoriteCityStore(client)
        store.save("Tokyo")
        self.assertEqual(client.store, {"prefs:favoriteCityKey": "Tokyo".encode("utf-8")})
        self.assertEqual(store.get(), "Tokyo")
        store.clear()
        self.assertIsNone(store.get())

    def test_decoded_client_values(self):
        client = FakeRedis()
        client.store["prefs:favoriteCityKey"] = "Zürich"
        self.assertEqual(RedisFavoriteCityStore(client).get(), "Zürich")

    def test_failures_are_swallowed(self):
        store = RedisFavoriteCityStore(BrokenRedis())
        store.save("Tokyo")
        self.assertIsNone(store.get())
        store.clear()


if __name__ == "__main__":
    unittest.main()
