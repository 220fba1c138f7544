"""Custom exception hierarchy for the test suite minimisation search."""
from __future__ import annotations


class SuiteMinimisationError(Exception):
    """Base exception for the test suite minimisation search."""


class InvalidArgumentError(SuiteMinimisationError, ValueError):
    """Raised when a component is constructed or called with an invalid argument."""


class FitnessError(SuiteMinimisationError):
    """Raised when a fitness function yields a negative or NaN value."""


class SearchError(SuiteMinimisationError):
    """Raised when a search run encounters an unrecoverable error."""
