from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

CoverageMatrix = NDArray[np.bool_]


class FitnessPair(NamedTuple):
    """Normalised objective values of one test suite.

    ``size`` is minimised, ``coverage`` is maximised. Both lie in [0, 1].
    """

    size: float
    coverage: float


def as_coverage_matrix(matrix: ArrayLike) -> CoverageMatrix:
    """Return a read-only boolean (tests x lines) copy of ``matrix``.

    The matrix is expected to be rectangular; this is not validated.
    """
    result = np.array(matrix, dtype=bool, copy=True)
    if result.ndim == 1:
        result = result.reshape(-1, 1)
    result.flags.writeable = False
    return result
