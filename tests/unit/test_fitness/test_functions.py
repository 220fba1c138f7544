"""Tests for the size and coverage fitness functions."""
from __future__ import annotations

import math

import numpy as np
import pytest

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
from SuiteMinimisation.fitness.functions import (
    CoverageFitness,
    FitnessFunction,
    SizeFitness,
    check_objective_directions,
    evaluate,
)
from SuiteMinimisation.shared.errors import FitnessError, InvalidArgumentError
from SuiteMinimisation.shared.types import FitnessPair, as_coverage_matrix


class ConstantFitness:
    minimizing = True

    def __init__(self, value: float) -> None:
        self.value = value

    def __call__(self, chromosome) -> float:
        return self.value


class TestSizeFitness:
    def test_fraction_of_selected_tests(self, rng: np.random.RandomState) -> None:
        size_ff = SizeFitness(4)
        assert size_ff(TestSuiteChromosome([True, False, True, False], rng)) == 0.5

    def test_full_suite_is_one(self, rng: np.random.RandomState) -> None:
        size_ff = SizeFitness(3)
        assert size_ff(TestSuiteChromosome([True] * 3, rng)) == 1.0

    def test_zero_tests_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Number of tests"):
            SizeFitness(0)

    def test_is_minimizing(self) -> None:
        size_ff = SizeFitness(3)
        assert size_ff.minimizing
        assert isinstance(size_ff, FitnessFunction)


class TestCoverageFitness:
    def test_single_rows(self, rng, small_matrix) -> None:
        coverage_ff = CoverageFitness(as_coverage_matrix(small_matrix))
        assert coverage_ff(TestSuiteChromosome([True, False, False], rng)) == 0.5
        assert coverage_ff(TestSuiteChromosome([False, True, False], rng)) == 0.5
        assert coverage_ff(TestSuiteChromosome([False, False, True], rng)) == 1.0

    def test_union_of_rows(self, rng, small_matrix) -> None:
        coverage_ff = CoverageFitness(as_coverage_matrix(small_matrix))
        assert coverage_ff(TestSuiteChromosome([True, True, False], rng)) == 1.0

    def test_overlap_not_double_counted(self, rng: np.random.RandomState) -> None:
        matrix = as_coverage_matrix([[True, True, False, False], [True, True, False, False]])
        coverage_ff = CoverageFitness(matrix)
        assert coverage_ff(TestSuiteChromosome([True, True], rng)) == 0.5

    def test_no_lines_gives_zero(self, rng: np.random.RandomState) -> None:
        coverage_ff = CoverageFitness(np.zeros((2, 0), dtype=bool))
        assert coverage_ff(TestSuiteChromosome([True, True], rng)) == 0.0

    def test_equal_chromosomes_equal_fitness(self, rng, random_matrix) -> None:
        coverage_ff = CoverageFitness(as_coverage_matrix(random_matrix))
        genes = rng.random_sample(20) < 0.3
        a = TestSuiteChromosome(genes, rng)
        b = a.copy()
        assert coverage_ff(a) == coverage_ff(b)

    def test_is_maximizing(self, small_matrix) -> None:
        coverage_ff = CoverageFitness(as_coverage_matrix(small_matrix))
        assert not coverage_ff.minimizing


class TestEvaluate:
    def test_returns_fitness_pair(self, rng, small_matrix) -> None:
        matrix = as_coverage_matrix(small_matrix)
        pair = evaluate(
            TestSuiteChromosome([False, False, True], rng),
            SizeFitness(3),
            CoverageFitness(matrix),
        )
        assert isinstance(pair, FitnessPair)
        assert pair.size == pytest.approx(1 / 3)
        assert pair.coverage == 1.0

    def test_negative_fitness_rejected(self, rng: np.random.RandomState) -> None:
        chromosome = TestSuiteChromosome([True], rng)
        with pytest.raises(FitnessError, match="size"):
            evaluate(chromosome, ConstantFitness(-0.1), ConstantFitness(0.5))

    def test_nan_fitness_rejected(self, rng: np.random.RandomState) -> None:
        chromosome = TestSuiteChromosome([True], rng)
        with pytest.raises(FitnessError, match="coverage"):
            evaluate(chromosome, ConstantFitness(0.5), ConstantFitness(math.nan))


class TestObjectiveDirections:
    def test_size_and_coverage_accepted(self, small_matrix) -> None:
        check_objective_directions(SizeFitness(3), CoverageFitness(small_matrix))

    def test_maximizing_size_rejected(self, small_matrix) -> None:
        with pytest.raises(InvalidArgumentError, match="Size fitness"):
            check_objective_directions(
                CoverageFitness(small_matrix), CoverageFitness(small_matrix)
            )

    def test_minimizing_coverage_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Coverage fitness"):
            check_objective_directions(SizeFitness(3), ConstantFitness(0.5))
