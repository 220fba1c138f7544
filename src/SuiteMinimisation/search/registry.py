"""Algorithm registry for multi-objective searches."""
from __future__ import annotations

from typing import TYPE_CHECKING

from SuiteMinimisation.search.nsga2 import NSGA2
from SuiteMinimisation.search.random_search import RandomSearch

if TYPE_CHECKING:
    from SuiteMinimisation.search.builder import AlgorithmBuilder
    from SuiteMinimisation.search.strategy import SearchAlgorithm


class AlgorithmRegistry:
    """Registry mapping algorithm names to their implementation classes.

    Registered classes expose a ``name`` attribute and a ``from_builder``
    classmethod.
    """

    def __init__(self) -> None:
        self._algorithms: dict[str, type] = {}

    def register(self, algorithm_class: type) -> None:
        """Register an algorithm class by its name attribute."""
        self._algorithms[algorithm_class.name] = algorithm_class

    def create(self, name: str, builder: AlgorithmBuilder) -> SearchAlgorithm:
        """Instantiate the algorithm registered under ``name``."""
        if name not in self._algorithms:
            available = ", ".join(sorted(self._algorithms))
            msg = (
                f"Unknown algorithm {name!r}. "
                f"Available: {available}"
            )
            raise KeyError(msg)
        return self._algorithms[name].from_builder(builder)

    def available(self) -> list[str]:
        """Return names of all registered algorithms."""
        return sorted(self._algorithms)

    def is_available(self, name: str) -> bool:
        """Check if an algorithm is registered."""
        return name in self._algorithms


def _build_default_registry() -> AlgorithmRegistry:
    registry = AlgorithmRegistry()
    registry.register(RandomSearch)
    registry.register(NSGA2)
    return registry


default_registry = _build_default_registry()
