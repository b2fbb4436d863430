"""Tests for top-level package lazy exports."""

from __future__ import annotations

import unittest

import eventhub


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_lazy_exports_resolve_known_symbols(self) -> None:
        for name in eventhub.__all__:
            self.assertIsNotNone(getattr(eventhub, name), name)
        self.assertTrue(callable(eventhub.attach))
        self.assertTrue(callable(eventhub.load_config))
        self.assertIs(eventhub.EventHub, eventhub.hub.EventHub)

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(eventhub, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
