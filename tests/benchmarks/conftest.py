"""Fixtures for benchmark tests generating large synthetic coverage data."""
from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def make_coverage_matrix():
    """Factory fixture that generates random boolean coverage matrices."""

    def _make(n_tests: int, n_lines: int = 1000, density: float = 0.05, seed: int = 42):
        rng = np.random.RandomState(seed)
        return rng.random_sample((n_tests, n_lines)) < density

    return _make


@pytest.fixture
def make_fitness_points():
    """Factory fixture that generates random (size, coverage) pairs."""
    from SuiteMinimisation.shared.types import FitnessPair

    def _make(n: int, seed: int = 42) -> list[FitnessPair]:
        rng = np.random.RandomState(seed)
        return [FitnessPair(float(s), float(c)) for s, c in rng.random_sample((n, 2))]

    return _make
