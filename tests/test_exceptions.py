"""Tests for the exception hierarchy."""

from __future__ import annotations

import unittest

from dropins.exceptions import ConfigValidationError, DropinsError, InvalidArgumentError


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(InvalidArgumentError, DropinsError))
        self.assertTrue(issubclass(ConfigValidationError, DropinsError))

    def test_invalid_argument_matches_builtin_errors(self) -> None:
        self.assertTrue(issubclass(InvalidArgumentError, TypeError))
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))


if __name__ == "__main__":
    unittest.main()
