"""Operator protocols -- the ports for variation and sampling strategies."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome


@runtime_checkable
class Mutation(Protocol):
    """Protocol for mutation operators.

    Implementations return a new chromosome and never modify the parent.
    """

    def apply(self, parent: TestSuiteChromosome) -> TestSuiteChromosome: ...


@runtime_checkable
class Crossover(Protocol):
    """Protocol for crossover operators producing two offspring."""

    def apply(
        self, parent1: TestSuiteChromosome, parent2: TestSuiteChromosome
    ) -> tuple[TestSuiteChromosome, TestSuiteChromosome]: ...


@runtime_checkable
class ChromosomeGenerator(Protocol):
    """Protocol for samplers of random chromosomes."""

    def __call__(self) -> TestSuiteChromosome: ...


class IdentityMutation:
    """Mutation that returns an unchanged copy of the parent."""

    def apply(self, parent: TestSuiteChromosome) -> TestSuiteChromosome:
        return parent.copy()

    def __repr__(self) -> str:
        return "IdentityMutation()"


class IdentityCrossover:
    """Crossover that returns unchanged copies of both parents."""

    def apply(
        self, parent1: TestSuiteChromosome, parent2: TestSuiteChromosome
    ) -> tuple[TestSuiteChromosome, TestSuiteChromosome]:
        return parent1.copy(), parent2.copy()

    def __repr__(self) -> str:
        return "IdentityCrossover()"
