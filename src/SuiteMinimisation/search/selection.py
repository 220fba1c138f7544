"""Binary tournament parent selection."""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

import numpy as np

from SuiteMinimisation.shared.errors import SearchError

C = TypeVar("C")


class BinaryTournamentSelection(Generic[C]):
    """Picks the better of two distinct, uniformly drawn population members.

    ``comparator(a, b)`` returns a positive number if ``a`` is better,
    a negative one if ``b`` is better and zero on ties; ties go to the
    first drawn member.
    """

    def __init__(
        self,
        comparator: Callable[[C, C], int],
        rng: np.random.RandomState,
    ) -> None:
        self._comparator = comparator
        self._rng = rng

    def apply(self, population: Sequence[C]) -> C:
        size = len(population)
        if size == 0:
            raise SearchError("Population is empty")
        if size == 1:
            return population[0]

        first, second = self._rng.choice(size, size=2, replace=False)
        c1 = population[int(first)]
        c2 = population[int(second)]
        return c1 if self._comparator(c1, c2) >= 0 else c2
