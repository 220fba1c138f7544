"""Online archive of mutually non-dominated test suites."""
from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from SuiteMinimisation.search.pareto import dominates

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
    from SuiteMinimisation.shared.types import FitnessPair


class ParetoArchive:
    """Exact non-dominated set, updated one candidate at a time.

    Invariant: no member dominates another at any point in time. Members
    with identical objective values coexist since neither dominates.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[TestSuiteChromosome, FitnessPair]] = []

    def insert(self, candidate: TestSuiteChromosome, fitness: FitnessPair) -> bool:
        """Offer ``candidate`` with its precomputed ``fitness``.

        Returns False and leaves the archive untouched if a member dominates
        the candidate; otherwise removes the members the candidate
        dominates, adds it and returns True.
        """
        survivors = []
        for entry in self._entries:
            if dominates(entry[1], fitness):
                return False
            if not dominates(fitness, entry[1]):
                survivors.append(entry)
        survivors.append((candidate, fitness))
        self._entries = survivors
        return True

    @property
    def members(self) -> list[TestSuiteChromosome]:
        return [chromosome for chromosome, _ in self._entries]

    @property
    def fitness(self) -> list[FitnessPair]:
        return [pair for _, pair in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TestSuiteChromosome]:
        return iter(self.members)
