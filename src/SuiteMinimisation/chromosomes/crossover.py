"""Single-point crossover for test suite chromosomes."""
from __future__ import annotations

import numpy as np

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
from SuiteMinimisation.shared.errors import InvalidArgumentError


class SinglePointCrossover:
    """Swaps the gene tails of two parents after a uniformly drawn cut.

    For a cut ``c`` in ``[0, n)``::

        child1 = parent1[:c] + parent2[c:]
        child2 = parent2[:c] + parent1[c:]

    Each child keeps the operators of the parent contributing its head.
    """

    def __init__(self, rng: np.random.RandomState) -> None:
        self._rng = rng

    def apply(
        self, parent1: TestSuiteChromosome, parent2: TestSuiteChromosome
    ) -> tuple[TestSuiteChromosome, TestSuiteChromosome]:
        g1 = parent1.genes
        g2 = parent2.genes
        if g1.size != g2.size:
            raise InvalidArgumentError(
                f"Parents differ in length: {g1.size} != {g2.size}"
            )
        if g1.size == 0:
            return parent1.copy(), parent2.copy()

        cut = self._rng.randint(g1.size)
        child1 = np.concatenate((g1[:cut], g2[cut:]))
        child2 = np.concatenate((g2[:cut], g1[cut:]))
        return parent1.with_genes(child1), parent2.with_genes(child2)

    def __repr__(self) -> str:
        return "SinglePointCrossover()"
