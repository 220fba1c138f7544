"""Pareto dominance, fast non-dominated sorting and crowding distance.

Size is minimised and coverage is maximised throughout.
"""
from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from SuiteMinimisation.shared.types import FitnessPair

C = TypeVar("C")

Objectives = Callable[[C], FitnessPair]


def dominates(a: FitnessPair, b: FitnessPair) -> bool:
    """True if ``a`` is no worse than ``b`` in both objectives and better in one."""
    not_worse = a.size <= b.size and a.coverage >= b.coverage
    better = a.size < b.size or a.coverage > b.coverage
    return not_worse and better


def dominance_matrix(fitness: Sequence[FitnessPair]) -> NDArray[np.bool_]:
    """Boolean (n, n) matrix where entry [p, q] tells whether p dominates q."""
    if not fitness:
        return np.zeros((0, 0), dtype=bool)
    values = np.asarray(fitness, dtype=float)
    size = values[:, 0]
    coverage = values[:, 1]
    not_worse = (size[:, None] <= size[None, :]) & (coverage[:, None] >= coverage[None, :])
    better = (size[:, None] < size[None, :]) | (coverage[:, None] > coverage[None, :])
    return not_worse & better


def fast_non_dominated_sort(
    population: Sequence[C], objectives: Objectives
) -> list[list[C]]:
    """Partition ``population`` into ordered non-dominated fronts.

    Front 0 holds the members no other member dominates; front i+1 holds
    the members dominated only by members of fronts 0..i. Every member
    appears in exactly one front. Objectives are computed once per member.
    """
    fitness = [objectives(c) for c in population]
    dominated = dominance_matrix(fitness)
    # n(p): how many members dominate p
    counts = dominated.sum(axis=0).astype(int)

    fronts: list[list[C]] = []
    current = [int(p) for p in np.flatnonzero(counts == 0)]
    while current:
        fronts.append([population[p] for p in current])
        following: list[int] = []
        for p in current:
            for q in np.flatnonzero(dominated[p]):
                counts[q] -= 1
                if counts[q] == 0:
                    following.append(int(q))
        current = following
    return fronts


def crowding_distance(front: Sequence[C], objectives: Objectives) -> dict[int, float]:
    """Crowding distance of every member of a non-dominated front.

    Returns a table keyed by ``id()`` of the members so that structurally
    equal chromosomes keep independent entries. Fronts of at most two
    members get infinite distance everywhere; otherwise the boundary
    members of each objective are infinite and interior members sum the
    normalised gap between their neighbours over both objectives.
    """
    distances = {id(c): 0.0 for c in front}
    n = len(front)
    if n <= 2:
        return {key: math.inf for key in distances}

    fitness = {id(c): objectives(c) for c in front}
    for field in FitnessPair._fields:
        ordered = sorted(front, key=lambda c: getattr(fitness[id(c)], field))
        values = [getattr(fitness[id(c)], field) for c in ordered]
        distances[id(ordered[0])] = math.inf
        distances[id(ordered[-1])] = math.inf
        span = values[-1] - values[0]
        if span <= 0:
            continue
        for i in range(1, n - 1):
            distances[id(ordered[i])] += (values[i + 1] - values[i - 1]) / span
    return distances
