"""Assembly of search algorithms from a coverage matrix and a budget."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from SuiteMinimisation.chromosomes.crossover import SinglePointCrossover
from SuiteMinimisation.chromosomes.generator import TestSuiteChromosomeGenerator
from SuiteMinimisation.chromosomes.mutation import BitFlipMutation
from SuiteMinimisation.fitness.functions import CoverageFitness, SizeFitness
from SuiteMinimisation.shared.config import SearchConfig
from SuiteMinimisation.shared.types import CoverageMatrix, as_coverage_matrix

if TYPE_CHECKING:
    from SuiteMinimisation.fitness.stopping import StoppingCondition
    from SuiteMinimisation.search.registry import AlgorithmRegistry
    from SuiteMinimisation.search.strategy import SearchAlgorithm


class AlgorithmBuilder:
    """Holds the collaborators shared by every algorithm of one run.

    The size and coverage fitness functions are created once here and
    reused for hyper-volume computation, so results stay comparable
    across algorithms.
    """

    def __init__(
        self,
        rng: np.random.RandomState,
        stopping_condition: StoppingCondition,
        coverage_matrix: ArrayLike,
        config: SearchConfig | None = None,
    ) -> None:
        self._rng = rng
        self._stopping_condition = stopping_condition
        self._matrix = as_coverage_matrix(coverage_matrix)
        self._config = config or SearchConfig()
        self._size_ff = SizeFitness(self.number_of_tests)
        self._coverage_ff = CoverageFitness(self._matrix)

    @property
    def rng(self) -> np.random.RandomState:
        return self._rng

    @property
    def stopping_condition(self) -> StoppingCondition:
        return self._stopping_condition

    @property
    def coverage_matrix(self) -> CoverageMatrix:
        return self._matrix

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def number_of_tests(self) -> int:
        return int(self._matrix.shape[0])

    @property
    def number_of_lines(self) -> int:
        return int(self._matrix.shape[1])

    @property
    def size_ff(self) -> SizeFitness:
        return self._size_ff

    @property
    def coverage_ff(self) -> CoverageFitness:
        return self._coverage_ff

    def mutation(self) -> BitFlipMutation:
        return BitFlipMutation(self._rng)

    def crossover(self) -> SinglePointCrossover:
        return SinglePointCrossover(self._rng)

    def generator(self) -> TestSuiteChromosomeGenerator:
        return TestSuiteChromosomeGenerator(
            self.number_of_tests, self._rng, self.mutation(), self.crossover()
        )

    def build(
        self, name: str, registry: AlgorithmRegistry | None = None
    ) -> SearchAlgorithm:
        """Build the algorithm registered under ``name``."""
        if registry is None:
            from SuiteMinimisation.search.registry import default_registry

            registry = default_registry
        return registry.create(name, self)
