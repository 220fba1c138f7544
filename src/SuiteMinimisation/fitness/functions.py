"""Normalised size and coverage fitness functions."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from SuiteMinimisation.shared.errors import FitnessError, InvalidArgumentError
from SuiteMinimisation.shared.types import CoverageMatrix, FitnessPair

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome


@runtime_checkable
class FitnessFunction(Protocol):
    """Protocol for fitness functions over test suite chromosomes.

    Implementations must be pure: structurally equal chromosomes yield
    equal values, and values are never negative or NaN.
    """

    @property
    def minimizing(self) -> bool: ...

    def __call__(self, chromosome: TestSuiteChromosome) -> float: ...


class SizeFitness:
    """Fraction of all test cases selected by a suite (minimising)."""

    minimizing = True

    def __init__(self, number_of_tests: int) -> None:
        if number_of_tests <= 0:
            raise InvalidArgumentError(
                f"Number of tests must be positive, got {number_of_tests}"
            )
        self._number_of_tests = number_of_tests

    def __call__(self, chromosome: TestSuiteChromosome) -> float:
        return chromosome.selected_count / self._number_of_tests

    def __repr__(self) -> str:
        return f"SizeFitness(tests={self._number_of_tests})"


class CoverageFitness:
    """Fraction of lines covered by the union of a suite's tests (maximising)."""

    minimizing = False

    def __init__(self, coverage_matrix: CoverageMatrix) -> None:
        self._matrix = coverage_matrix
        self._number_of_lines = coverage_matrix.shape[1]

    def __call__(self, chromosome: TestSuiteChromosome) -> float:
        if self._number_of_lines == 0:
            return 0.0
        rows = self._matrix[chromosome.selected_indices()]
        covered = np.any(rows, axis=0)
        return int(np.count_nonzero(covered)) / self._number_of_lines

    def __repr__(self) -> str:
        return (
            f"CoverageFitness(tests={self._matrix.shape[0]}, "
            f"lines={self._number_of_lines})"
        )


def evaluate(
    chromosome: TestSuiteChromosome,
    size_ff: FitnessFunction,
    coverage_ff: FitnessFunction,
) -> FitnessPair:
    """Compute both objectives of ``chromosome``.

    Raises FitnessError if a fitness function returns a negative or NaN value.
    """
    pair = FitnessPair(size=float(size_ff(chromosome)), coverage=float(coverage_ff(chromosome)))
    for name, value in zip(FitnessPair._fields, pair):
        if math.isnan(value) or value < 0.0:
            raise FitnessError(f"Invalid {name} fitness {value} for {chromosome!r}")
    return pair


def check_objective_directions(
    size_ff: FitnessFunction, coverage_ff: FitnessFunction
) -> None:
    """Raise InvalidArgumentError unless size is minimised and coverage maximised.

    Dominance compares ``FitnessPair`` values with these fixed directions.
    """
    if not size_ff.minimizing:
        raise InvalidArgumentError(f"Size fitness must be minimizing: {size_ff!r}")
    if coverage_ff.minimizing:
        raise InvalidArgumentError(f"Coverage fitness must be maximizing: {coverage_ff!r}")
