"""Stopping conditions gating the search loops."""
from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from SuiteMinimisation.shared.errors import InvalidArgumentError


@runtime_checkable
class StoppingCondition(Protocol):
    """Protocol for budget trackers polled at the search loop heads."""

    def notify_search_started(self) -> None: ...

    def notify_fitness_evaluation(self) -> None: ...

    def notify_fitness_evaluations(self, evaluations: int) -> None: ...

    def search_must_stop(self) -> bool: ...

    def get_progress(self) -> float: ...


class MaxFitnessEvaluations:
    """Stops the search after a fixed number of fitness evaluations.

    Before ``notify_search_started`` the budget counts as exhausted.
    """

    def __init__(self, max_fitness_evaluations: int) -> None:
        if max_fitness_evaluations <= 0:
            raise InvalidArgumentError(
                f"Fitness evaluations must be positive, got {max_fitness_evaluations}"
            )
        self._max_fitness_evaluations = max_fitness_evaluations
        self._fitness_evaluations = sys.maxsize

    @classmethod
    def of(cls, max_fitness_evaluations: int) -> MaxFitnessEvaluations:
        return cls(max_fitness_evaluations)

    @property
    def max_fitness_evaluations(self) -> int:
        return self._max_fitness_evaluations

    @property
    def fitness_evaluations(self) -> int:
        return self._fitness_evaluations

    def notify_search_started(self) -> None:
        self._fitness_evaluations = 0

    def notify_fitness_evaluation(self) -> None:
        self._fitness_evaluations += 1

    def notify_fitness_evaluations(self, evaluations: int) -> None:
        if evaluations < 0:
            raise InvalidArgumentError(
                f"Negative number of evaluations: {evaluations}"
            )
        self._fitness_evaluations += evaluations

    def search_must_stop(self) -> bool:
        return self._fitness_evaluations >= self._max_fitness_evaluations

    def get_progress(self) -> float:
        return self._fitness_evaluations / self._max_fitness_evaluations

    def __repr__(self) -> str:
        return f"MaxFitnessEvaluations({self._max_fitness_evaluations})"
