"""Bit-flip mutation for test suite chromosomes."""
from __future__ import annotations

import numpy as np

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome


class BitFlipMutation:
    """Flips every gene independently with probability 1/n.

    One uniform draw per gene is taken from the shared random source,
    in gene order, so the stream stays reproducible under a fixed seed.
    """

    def __init__(self, rng: np.random.RandomState) -> None:
        self._rng = rng

    def apply(self, parent: TestSuiteChromosome) -> TestSuiteChromosome:
        genes = parent.genes
        n = genes.size
        if n == 0:
            return parent.copy()
        flips = self._rng.random_sample(n) < 1.0 / n
        return parent.with_genes(genes ^ flips)

    def __repr__(self) -> str:
        return "BitFlipMutation(p=1/n)"
