"""Tests for top-level package lazy exports."""

from __future__ import annotations

import unittest

import dropins


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_lazy_exports_resolve_known_symbols(self) -> None:
        for name in dropins.__all__:
            self.assertIsNotNone(getattr(dropins, name), name)
        self.assertTrue(callable(dropins.load_config))
        self.assertTrue(callable(dropins.string_format))
        self.assertTrue(callable(dropins.pad))

    def test_exports_are_the_module_objects(self) -> None:
        from dropins.events import EventDispatcher

        self.assertIs(dropins.EventDispatcher, EventDispatcher)

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(dropins, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
