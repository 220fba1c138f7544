"""Search algorithm protocol shared by all multi-objective searches."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
    from SuiteMinimisation.fitness.stopping import StoppingCondition


@runtime_checkable
class SearchAlgorithm(Protocol):
    """Protocol for searches approximating the size/coverage Pareto front.

    Every ``solve`` call performs a fresh search, independent of previous
    calls; only the shared random source carries over. Implementations
    may inherit from this protocol to reuse the budget helpers below.
    """

    @property
    def name(self) -> str: ...

    @property
    def stopping_condition(self) -> StoppingCondition: ...

    def solve(self) -> list[TestSuiteChromosome]: ...

    def search_must_stop(self) -> bool:
        return self.stopping_condition.search_must_stop()

    def get_progress(self) -> float:
        return self.stopping_condition.get_progress()

    def notify_search_started(self) -> None:
        self.stopping_condition.notify_search_started()

    def notify_fitness_evaluation(self) -> None:
        self.stopping_condition.notify_fitness_evaluation()
