"""Test suite chromosome: boolean encoding of a candidate test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from SuiteMinimisation.chromosomes.ports import IdentityCrossover, IdentityMutation
from SuiteMinimisation.shared.errors import InvalidArgumentError

if TYPE_CHECKING:
    from SuiteMinimisation.chromosomes.ports import Crossover, Mutation


class TestSuiteChromosome:
    """A test suite encoded as one boolean gene per test case.

    Invariants:
    - at least one gene is set (an all-false vector is repaired by
      activating one random index)
    - the gene vector is private and read-only; every transformation
      returns a new chromosome with its own storage

    Equality and hashing consider the genes only, so two chromosomes
    encoding the same suite compare equal.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        genes: ArrayLike,
        rng: np.random.RandomState,
        mutation: Mutation | None = None,
        crossover: Crossover | None = None,
    ) -> None:
        if genes is None:
            raise InvalidArgumentError("Gene vector must not be None")
        self._rng = rng
        self._mutation = mutation if mutation is not None else IdentityMutation()
        self._crossover = crossover if crossover is not None else IdentityCrossover()
        self._genes = np.array(genes, dtype=bool, copy=True).ravel()
        self._ensure_at_least_one_test()
        self._genes.flags.writeable = False

    def _ensure_at_least_one_test(self) -> None:
        if self._genes.size > 0 and not self._genes.any():
            self._genes[self._rng.randint(self._genes.size)] = True

    @property
    def genes(self) -> NDArray[np.bool_]:
        """Writable copy of the gene vector."""
        return self._genes.copy()

    @property
    def rng(self) -> np.random.RandomState:
        return self._rng

    @property
    def mutation(self) -> Mutation:
        return self._mutation

    @property
    def crossover_operator(self) -> Crossover:
        return self._crossover

    @property
    def selected_count(self) -> int:
        return int(np.count_nonzero(self._genes))

    def selected_indices(self) -> list[int]:
        """Indices of the test cases contained in this suite."""
        return [int(i) for i in np.flatnonzero(self._genes)]

    def with_genes(self, genes: ArrayLike) -> TestSuiteChromosome:
        """New chromosome sharing this one's operators and random source."""
        return TestSuiteChromosome(genes, self._rng, self._mutation, self._crossover)

    def copy(self) -> TestSuiteChromosome:
        return self.with_genes(self._genes)

    def mutate(self) -> TestSuiteChromosome:
        return self._mutation.apply(self)

    def crossover(
        self, other: TestSuiteChromosome
    ) -> tuple[TestSuiteChromosome, TestSuiteChromosome]:
        return self._crossover.apply(self, other)

    def __len__(self) -> int:
        return int(self._genes.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestSuiteChromosome):
            return NotImplemented
        return bool(np.array_equal(self._genes, other._genes))

    def __hash__(self) -> int:
        return hash((self._genes.size, self._genes.tobytes()))

    def __repr__(self) -> str:
        bits = "".join("1" if g else "0" for g in self._genes)
        return f"TestSuiteChromosome({bits})"
