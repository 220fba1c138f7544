from __future__ import annotations

import numpy as np
import pytest


class FixedRandom:
    """Random source stub returning fixed values, for pinning cut points."""

    def __init__(self, integer: int = 0, uniform: float = 0.0) -> None:
        self.integer = integer
        self.uniform = uniform

    def randint(self, low, high=None):
        return self.integer

    def random_sample(self, size=None):
        if size is None:
            return self.uniform
        return np.full(size, self.uniform)


@pytest.fixture()
def rng() -> np.random.RandomState:
    return np.random.RandomState(42)


@pytest.fixture()
def fixed_random():
    return FixedRandom


@pytest.fixture()
def small_matrix() -> np.ndarray:
    """3 tests x 2 lines; test 2 covers everything on its own."""
    return np.array(
        [
            [True, False],
            [False, True],
            [True, True],
        ]
    )


@pytest.fixture()
def random_matrix() -> np.ndarray:
    """20 tests x 40 lines with ~15% coverage density."""
    generator = np.random.RandomState(7)
    return generator.random_sample((20, 40)) < 0.15
