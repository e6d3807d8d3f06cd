"""Exceptions raised by the quiz core."""
from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz errors."""


class UnknownTestError(QuizError, LookupError):
    """Raised when a test id does not resolve to a test in the catalog."""

    def __init__(self, test_id: object):
        super().__init__(f"Test not found: {test_id!r}")
        self.test_id = test_id


class CatalogError(QuizError, ValueError):
    """Raised when a catalog document cannot be turned into tests."""
