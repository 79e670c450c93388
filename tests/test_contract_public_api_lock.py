from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import brandbento.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(list(api.__all__), list(api._PUBLIC_EXPORTS))

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"brandbento.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name), f"brandbento.api {name} is None")

    def test_public_exports_are_sorted_and_unique(self) -> None:
        import brandbento.api as api

        self.assertIsInstance(api._PUBLIC_EXPORTS, tuple)
        self.assertEqual(len(set(api._PUBLIC_EXPORTS)), len(api._PUBLIC_EXPORTS))
        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))

    def test_package_reexports_match_api_all(self) -> None:
        import brandbento
        import brandbento.api as api

        self.assertEqual(brandbento.__all__, list(api.__all__))
        for name in api.__all__:
            self.assertTrue(hasattr(brandbento, name), f"brandbento does not re-export: {name}")
            self.assertIs(getattr(brandbento, name), getattr(api, name), f"brandbento.{name} must be same object as brandbento.api.{name}")

    def test_store_round_trip_helpers(self) -> None:
        import tempfile
        from pathlib import Path

        import brandbento

        store = brandbento.BrandStore(preset="foodDrink")
        with tempfile.TemporaryDirectory() as td:
            path = brandbento.save_store_to_json(store, Path(td) / "doc.json")
            loaded = brandbento.load_store_from_json(path)
        self.assertEqual(loaded.brand, store.brand)
        self.assertEqual(loaded.active_preset, "foodDrink")
        with self.assertRaises(TypeError):
            brandbento.save_store_to_json("store", "x.json")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)
