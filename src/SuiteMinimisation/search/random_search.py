"""Random-search baseline maintaining an explicit Pareto archive."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
from SuiteMinimisation.chromosomes.generator import sample_suite_genes
from SuiteMinimisation.fitness.functions import (
    FitnessFunction,
    check_objective_directions,
    evaluate,
)
from SuiteMinimisation.search.archive import ParetoArchive
from SuiteMinimisation.search.strategy import SearchAlgorithm
from SuiteMinimisation.shared.errors import InvalidArgumentError
from SuiteMinimisation.shared.types import CoverageMatrix

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.ports import Crossover, Mutation
    from SuiteMinimisation.fitness.stopping import StoppingCondition
    from SuiteMinimisation.search.builder import AlgorithmBuilder

logger = logging.getLogger(__name__)


class RandomSearch(SearchAlgorithm):
    """Streaming sampler that keeps every non-dominated suite it sees.

    Candidates are offered to the archive in four phases, each run only
    while budget remains:

    1. the full suite,
    2. the greedy coverage prefixes (every growing prefix is a candidate),
    3. the ``best_singletons`` single-test suites with the highest coverage,
    4. random suites biased towards small sizes, until the budget is spent.

    Every candidate costs exactly one evaluation unit.
    """

    name = "random"

    def __init__(
        self,
        stopping_condition: StoppingCondition,
        rng: np.random.RandomState,
        coverage_matrix: CoverageMatrix,
        size_ff: FitnessFunction,
        coverage_ff: FitnessFunction,
        mutation: Mutation | None = None,
        crossover: Crossover | None = None,
        best_singletons: int = 20,
    ) -> None:
        if best_singletons < 0:
            raise InvalidArgumentError(
                f"Best singletons must not be negative, got {best_singletons}"
            )
        check_objective_directions(size_ff, coverage_ff)
        self._stopping_condition = stopping_condition
        self._rng = rng
        self._matrix = coverage_matrix
        self._size_ff = size_ff
        self._coverage_ff = coverage_ff
        self._mutation = mutation
        self._crossover = crossover
        self._best_singletons = best_singletons

    @classmethod
    def from_builder(cls, builder: AlgorithmBuilder) -> RandomSearch:
        return cls(
            stopping_condition=builder.stopping_condition,
            rng=builder.rng,
            coverage_matrix=builder.coverage_matrix,
            size_ff=builder.size_ff,
            coverage_ff=builder.coverage_ff,
            mutation=builder.mutation(),
            crossover=builder.crossover(),
            best_singletons=builder.config.best_singletons,
        )

    @property
    def stopping_condition(self) -> StoppingCondition:
        return self._stopping_condition

    @property
    def number_of_tests(self) -> int:
        return int(self._matrix.shape[0])

    def solve(self) -> list[TestSuiteChromosome]:
        self.notify_search_started()
        archive = ParetoArchive()
        n = self.number_of_tests

        if not self.search_must_stop():
            self._evaluate_and_insert(np.ones(n, dtype=bool), archive)

        if not self.search_must_stop():
            self._insert_greedy_prefixes(archive)
        logger.debug(
            "[SUITE-MIN] stage=random event=seeded archive=%d progress=%.3f",
            len(archive),
            self.get_progress(),
        )

        if not self.search_must_stop():
            for index in self.top_singletons(min(self._best_singletons, n)):
                if self.search_must_stop():
                    break
                genes = np.zeros(n, dtype=bool)
                genes[index] = True
                self._evaluate_and_insert(genes, archive)

        samples = 0
        while not self.search_must_stop():
            self._evaluate_and_insert(sample_suite_genes(n, self._rng), archive)
            samples += 1

        logger.info(
            "[SUITE-MIN] stage=random event=complete samples=%d front_size=%d "
            "best_coverage=%.3f",
            samples,
            len(archive),
            max((pair.coverage for pair in archive.fitness), default=0.0),
        )
        return archive.members

    def top_singletons(self, k: int) -> list[int]:
        """Indices of the ``k`` tests covering the most lines, ties by index."""
        per_test = np.count_nonzero(self._matrix, axis=1)
        order = np.argsort(-per_test, kind="stable")
        return [int(i) for i in order[:max(k, 0)]]

    def _insert_greedy_prefixes(self, archive: ParetoArchive) -> None:
        genes = np.zeros(self.number_of_tests, dtype=bool)
        covered = np.zeros(self._matrix.shape[1], dtype=bool)

        while not self.search_must_stop():
            gains = np.count_nonzero(self._matrix & ~covered, axis=1)
            gains[genes] = 0
            if gains.size == 0:
                break
            best = int(np.argmax(gains))
            if gains[best] == 0:
                break

            genes[best] = True
            covered |= self._matrix[best]
            self._evaluate_and_insert(genes, archive)

            if covered.all():
                break

    def _evaluate_and_insert(self, genes: NDArray[np.bool_], archive: ParetoArchive) -> None:
        candidate = TestSuiteChromosome(genes, self._rng, self._mutation, self._crossover)
        fitness = evaluate(candidate, self._size_ff, self._coverage_ff)
        self.notify_fitness_evaluation()
        archive.insert(candidate, fitness)
