import unittest

from city_weather.main import APP_TITLE, app


class TestMain(unittest.TestCase):
    def test_app_metadata(self):
        self.assertEqual(app.title, "City Weather")
        self.assertEqual(APP_TITLE, app.title)

    def test_api_routes_are_mounted_under_v1(self):
        paths = app.openapi()["paths"]
        self.assertIn("/v1/state", paths)
        self.assertIn("/v1/search", paths)
        self.assertIn("/v1/reset", paths)
        self.assertEqual(set(paths["/v1/favorite"]), {"get", "post", "delete"})


if __name__ == "__main__":
    unittest.main()
