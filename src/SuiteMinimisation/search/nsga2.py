"""NSGA-II generational search for the size/coverage trade-off."""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import numpy as np

from SuiteMinimisation.fitness.functions import (
    FitnessFunction,
    check_objective_directions,
    evaluate,
)
from SuiteMinimisation.search.pareto import crowding_distance, fast_non_dominated_sort
from SuiteMinimisation.search.selection import BinaryTournamentSelection
from SuiteMinimisation.search.strategy import SearchAlgorithm
from SuiteMinimisation.shared.errors import InvalidArgumentError
from SuiteMinimisation.shared.types import FitnessPair

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
    from SuiteMinimisation.chromosomes.ports import ChromosomeGenerator
    from SuiteMinimisation.fitness.stopping import StoppingCondition
    from SuiteMinimisation.search.builder import AlgorithmBuilder

logger = logging.getLogger(__name__)


class NSGA2(SearchAlgorithm):
    """Elitist non-dominated sorting genetic algorithm (Deb et al., 2002).

    Per generation: rank the population into fronts, breed N offspring by
    binary tournament (lower rank wins, larger crowding distance breaks
    ties), single-point crossover and mutation, then keep the best N of
    the 2N parents and offspring front by front. The front that does not
    fit is truncated by descending crowding distance.

    The budget is polled only at the heads of the initialisation, offspring
    and generation loops. Each evaluation of both objectives consumes one
    unit.
    """

    name = "nsga2"

    def __init__(
        self,
        stopping_condition: StoppingCondition,
        rng: np.random.RandomState,
        population_size: int,
        generator: ChromosomeGenerator,
        size_ff: FitnessFunction,
        coverage_ff: FitnessFunction,
    ) -> None:
        if population_size <= 0:
            raise InvalidArgumentError(
                f"Population size must be positive, got {population_size}"
            )
        check_objective_directions(size_ff, coverage_ff)
        self._stopping_condition = stopping_condition
        self._rng = rng
        self._population_size = population_size
        self._generator = generator
        self._size_ff = size_ff
        self._coverage_ff = coverage_ff
        # Keyed by id(): equal chromosomes need independent metadata.
        self._rank: dict[int, int] = {}
        self._crowding: dict[int, float] = {}

    @classmethod
    def from_builder(cls, builder: AlgorithmBuilder) -> NSGA2:
        return cls(
            stopping_condition=builder.stopping_condition,
            rng=builder.rng,
            population_size=builder.config.population_size,
            generator=builder.generator(),
            size_ff=builder.size_ff,
            coverage_ff=builder.coverage_ff,
        )

    @property
    def stopping_condition(self) -> StoppingCondition:
        return self._stopping_condition

    @property
    def population_size(self) -> int:
        return self._population_size

    def solve(self) -> list[TestSuiteChromosome]:
        self.notify_search_started()
        self._rank.clear()
        self._crowding.clear()

        population = self._initial_population()
        logger.debug(
            "[SUITE-MIN] stage=nsga2 event=initialised population=%d progress=%.3f",
            len(population),
            self.get_progress(),
        )

        generation = 0
        while not self.search_must_stop():
            fronts = fast_non_dominated_sort(population, self._objectives)
            self._assign_rank_and_crowding(fronts)

            offspring = self._breed(population)

            combined = population + offspring
            combined_fronts = fast_non_dominated_sort(combined, self._objectives)
            self._assign_rank_and_crowding(combined_fronts)
            population = self._select_next_population(combined_fronts)

            generation += 1
            logger.debug(
                "[SUITE-MIN] stage=nsga2 event=generation generation=%d "
                "front0=%d offspring=%d progress=%.3f",
                generation,
                len(combined_fronts[0]) if combined_fronts else 0,
                len(offspring),
                self.get_progress(),
            )

        final_fronts = fast_non_dominated_sort(population, self._objectives)
        self._rank.clear()
        self._crowding.clear()
        front = final_fronts[0] if final_fronts else []

        logger.info(
            "[SUITE-MIN] stage=nsga2 event=complete generations=%d front_size=%d",
            generation,
            len(front),
        )
        return list(front)

    def compare(self, a: TestSuiteChromosome, b: TestSuiteChromosome) -> int:
        """Positive if ``a`` is preferred: lower rank, then larger crowding distance."""
        rank_a = self._rank.get(id(a), sys.maxsize)
        rank_b = self._rank.get(id(b), sys.maxsize)
        if rank_a != rank_b:
            return 1 if rank_a < rank_b else -1
        crowding_a = self._crowding.get(id(a), 0.0)
        crowding_b = self._crowding.get(id(b), 0.0)
        return (crowding_a > crowding_b) - (crowding_a < crowding_b)

    def _objectives(self, chromosome: TestSuiteChromosome) -> FitnessPair:
        return evaluate(chromosome, self._size_ff, self._coverage_ff)

    def _evaluate(self, chromosome: TestSuiteChromosome) -> None:
        self._objectives(chromosome)
        self.notify_fitness_evaluation()

    def _initial_population(self) -> list[TestSuiteChromosome]:
        population: list[TestSuiteChromosome] = []
        while len(population) < self._population_size and not self.search_must_stop():
            chromosome = self._generator()
            self._evaluate(chromosome)
            population.append(chromosome)
        return population

    def _breed(self, population: list[TestSuiteChromosome]) -> list[TestSuiteChromosome]:
        selection = BinaryTournamentSelection(self.compare, self._rng)
        offspring: list[TestSuiteChromosome] = []
        while len(offspring) < self._population_size and not self.search_must_stop():
            parent1 = selection.apply(population)
            parent2 = selection.apply(population)

            first, second = parent1.crossover(parent2)
            child1 = first.mutate()
            child2 = second.mutate()

            self._evaluate(child1)
            offspring.append(child1)
            if len(offspring) < self._population_size:
                self._evaluate(child2)
                offspring.append(child2)
        return offspring

    def _assign_rank_and_crowding(self, fronts: list[list[TestSuiteChromosome]]) -> None:
        self._rank.clear()
        self._crowding.clear()
        for index, front in enumerate(fronts):
            for chromosome in front:
                self._rank[id(chromosome)] = index
            self._crowding.update(crowding_distance(front, self._objectives))

    def _select_next_population(
        self, fronts: list[list[TestSuiteChromosome]]
    ) -> list[TestSuiteChromosome]:
        survivors: list[TestSuiteChromosome] = []
        for front in fronts:
            if len(survivors) + len(front) <= self._population_size:
                survivors.extend(front)
                continue
            remaining = self._population_size - len(survivors)
            by_crowding = sorted(
                front,
                key=lambda c: self._crowding.get(id(c), 0.0),
                reverse=True,
            )
            survivors.extend(by_crowding[:remaining])
            break
        return survivors
