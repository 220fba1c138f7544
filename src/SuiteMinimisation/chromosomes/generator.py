"""Random sampling of test suite chromosomes."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.ports import Crossover, Mutation


def sample_suite_genes(n: int, rng: np.random.RandomState) -> NDArray[np.bool_]:
    """Draw a random gene vector biased towards small suites.

    The target size is ``k = 1 + floor(r**2 * (n - 1))`` for ``r`` uniform
    in [0, 1), and the k indices are picked with a partial Fisher-Yates
    shuffle over ``range(n)``.
    """
    genes = np.zeros(n, dtype=bool)
    if n == 0:
        return genes
    r = rng.random_sample()
    k = 1 + math.floor(r * r * (n - 1))
    pool = np.arange(n)
    for i in range(k):
        j = i + rng.randint(n - i)
        pool[i], pool[j] = pool[j], pool[i]
        genes[pool[i]] = True
    return genes


class TestSuiteChromosomeGenerator:
    """Samples random chromosomes over ``number_of_tests`` test cases."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        number_of_tests: int,
        rng: np.random.RandomState,
        mutation: Mutation | None = None,
        crossover: Crossover | None = None,
    ) -> None:
        self._number_of_tests = number_of_tests
        self._rng = rng
        self._mutation = mutation
        self._crossover = crossover

    @property
    def number_of_tests(self) -> int:
        return self._number_of_tests

    def __call__(self) -> TestSuiteChromosome:
        genes = sample_suite_genes(self._number_of_tests, self._rng)
        return TestSuiteChromosome(genes, self._rng, self._mutation, self._crossover)
