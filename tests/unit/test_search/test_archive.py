"""Tests for the online Pareto archive."""
from __future__ import annotations

import itertools

import numpy as np

from SuiteMinimisation.search.archive import ParetoArchive
from SuiteMinimisation.search.pareto import dominates
from SuiteMinimisation.shared.types import FitnessPair


class Member:
    def __init__(self, label: str) -> None:
        self.label = label


def _assert_mutually_non_dominated(archive: ParetoArchive) -> None:
    for a, b in itertools.permutations(archive.fitness, 2):
        assert not dominates(a, b)


class TestParetoArchive:
    def test_starts_empty(self) -> None:
        archive = ParetoArchive()
        assert len(archive) == 0
        assert archive.members == []

    def test_first_candidate_accepted(self) -> None:
        archive = ParetoArchive()
        member = Member("a")
        assert archive.insert(member, FitnessPair(0.5, 0.5))
        assert archive.members == [member]

    def test_dominated_candidate_rejected(self) -> None:
        archive = ParetoArchive()
        archive.insert(Member("good"), FitnessPair(0.2, 0.8))
        assert not archive.insert(Member("bad"), FitnessPair(0.5, 0.5))
        assert len(archive) == 1

    def test_dominating_candidate_evicts_members(self) -> None:
        archive = ParetoArchive()
        archive.insert(Member("a"), FitnessPair(0.5, 0.5))
        archive.insert(Member("b"), FitnessPair(0.3, 0.4))
        best = Member("best")
        assert archive.insert(best, FitnessPair(0.2, 0.9))
        assert archive.members == [best]

    def test_trade_offs_coexist(self) -> None:
        archive = ParetoArchive()
        archive.insert(Member("small"), FitnessPair(0.1, 0.3))
        archive.insert(Member("large"), FitnessPair(0.9, 1.0))
        assert len(archive) == 2

    def test_equal_fitness_coexists(self) -> None:
        archive = ParetoArchive()
        archive.insert(Member("a"), FitnessPair(0.3, 0.6))
        assert archive.insert(Member("b"), FitnessPair(0.3, 0.6))
        assert len(archive) == 2

    def test_invariant_after_every_insertion(self) -> None:
        rng = np.random.RandomState(11)
        archive = ParetoArchive()
        for i, (size, coverage) in enumerate(np.round(rng.random_sample((300, 2)), 2)):
            archive.insert(Member(str(i)), FitnessPair(float(size), float(coverage)))
            _assert_mutually_non_dominated(archive)

    def test_iteration_in_insertion_order(self) -> None:
        archive = ParetoArchive()
        members = [Member("a"), Member("b")]
        archive.insert(members[0], FitnessPair(0.1, 0.1))
        archive.insert(members[1], FitnessPair(0.9, 0.9))
        assert list(archive) == members
        assert archive.fitness == [FitnessPair(0.1, 0.1), FitnessPair(0.9, 0.9)]
