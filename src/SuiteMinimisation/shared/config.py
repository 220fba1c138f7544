from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for a complete search run."""

    max_evaluations: int = 1000
    population_size: int = 50
    repetitions: int = 10
    seed: int | None = None
    best_singletons: int = 20
    coverage_reference: float = 0.0
    size_reference: float = 1.0

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Build a config from ``SUITE_MIN_*`` environment variables."""
        seed = os.environ.get("SUITE_MIN_SEED", "")
        return cls(
            max_evaluations=int(os.environ.get("SUITE_MIN_MAX_EVALUATIONS", "1000")),
            population_size=int(os.environ.get("SUITE_MIN_POPULATION_SIZE", "50")),
            repetitions=int(os.environ.get("SUITE_MIN_REPETITIONS", "10")),
            seed=int(seed) if seed else None,
        )
