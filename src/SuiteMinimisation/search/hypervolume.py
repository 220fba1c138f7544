"""Two-dimensional hyper-volume indicator."""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

C = TypeVar("C")


def compute_hyper_volume(
    front: Sequence[C] | None,
    f1: Callable[[C], float],
    f2: Callable[[C], float],
    r1: float,
    r2: float,
) -> float:
    """Hyper-volume of ``front`` w.r.t. the reference point ``(r1, r2)``.

    ``f1`` is the maximised objective (coverage) and ``f2`` the minimised
    one (size); both must be normalised to [0, 1]. Points are swept in
    ascending ``f1`` order, adding one rectangle of width
    ``f1 - previous f1`` and height ``r2 - f2`` per point; only positive
    areas count. The front is assumed to be non-dominated.
    """
    if not front:
        return 0.0

    points = sorted(((f1(c), f2(c)) for c in front), key=lambda p: p[0])

    volume = 0.0
    previous = r1
    for first, second in points:
        width = first - previous
        height = r2 - second
        if width > 0 and height > 0:
            volume += width * height
        previous = first
    return volume
