from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def layered_matrix():
    """60 tests x 200 lines: block-local coverage plus a few broad tests.

    Every line is covered by at least one test.
    """
    rng = np.random.RandomState(42)
    n_tests, n_lines = 60, 200
    matrix = np.zeros((n_tests, n_lines), dtype=bool)
    for test in range(n_tests):
        start = (test * n_lines) // n_tests
        width = 5 + rng.randint(10)
        matrix[test, start:start + width] = True
    # broad smoke tests
    matrix[:4] |= rng.random_sample((4, n_lines)) < 0.4
    uncovered = ~matrix.any(axis=0)
    matrix[rng.randint(n_tests), uncovered] = True
    return matrix
