"""Search orchestrator: build one algorithm and run its repetitions."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
from SuiteMinimisation.fitness.stopping import MaxFitnessEvaluations
from SuiteMinimisation.search.builder import AlgorithmBuilder
from SuiteMinimisation.search.hypervolume import compute_hyper_volume
from SuiteMinimisation.shared.config import SearchConfig
from SuiteMinimisation.shared.errors import InvalidArgumentError, SearchError
from SuiteMinimisation.shared.types import as_coverage_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepetitionResult:
    """Outcome of a single search repetition."""

    repetition: int
    front: tuple[TestSuiteChromosome, ...]
    hyper_volume: float
    elapsed_seconds: float


def run_search(
    coverage_matrix: ArrayLike,
    algorithm: str = "nsga2",
    config: SearchConfig | None = None,
    rng: np.random.RandomState | None = None,
) -> list[RepetitionResult]:
    """Run ``config.repetitions`` independent searches with one algorithm.

    All repetitions draw from the same random source, seeded once from
    ``config.seed`` unless ``rng`` is given, so a fixed seed reproduces
    the whole sequence. Raises InvalidArgumentError for invalid settings
    and SearchError on any other failure.
    """
    config = config or SearchConfig()
    try:
        matrix = as_coverage_matrix(coverage_matrix)
        if matrix.shape[0] == 0:
            raise SearchError("Coverage matrix has no test cases")
        if config.repetitions <= 0:
            raise InvalidArgumentError(
                f"Repetitions must be positive, got {config.repetitions}"
            )

        rng = rng if rng is not None else np.random.RandomState(config.seed)
        stopping_condition = MaxFitnessEvaluations.of(config.max_evaluations)
        builder = AlgorithmBuilder(rng, stopping_condition, matrix, config)
        search = builder.build(algorithm)

        logger.info(
            "[SUITE-MIN] stage=search event=start algorithm=%s tests=%d lines=%d "
            "budget=%d repetitions=%d",
            algorithm,
            builder.number_of_tests,
            builder.number_of_lines,
            config.max_evaluations,
            config.repetitions,
        )

        results: list[RepetitionResult] = []
        for repetition in range(1, config.repetitions + 1):
            start = time.perf_counter()
            front = search.solve()
            elapsed = time.perf_counter() - start
            hyper_volume = compute_hyper_volume(
                front,
                builder.coverage_ff,
                builder.size_ff,
                config.coverage_reference,
                config.size_reference,
            )
            logger.info(
                "[SUITE-MIN] stage=search event=repetition algorithm=%s "
                "repetition=%d/%d hv=%.4f front_size=%d elapsed=%.3fs",
                algorithm,
                repetition,
                config.repetitions,
                hyper_volume,
                len(front),
                elapsed,
            )
            results.append(
                RepetitionResult(
                    repetition=repetition,
                    front=tuple(front),
                    hyper_volume=hyper_volume,
                    elapsed_seconds=elapsed,
                )
            )
        return results

    except (SearchError, InvalidArgumentError):
        raise
    except KeyError as exc:
        logger.warning(
            "[SUITE-MIN] stage=search event=error error=%s",
            str(exc),
        )
        raise SearchError(str(exc)) from exc
    except Exception as exc:
        logger.warning(
            "[SUITE-MIN] stage=search event=error error=%s",
            str(exc),
        )
        raise SearchError(str(exc)) from exc
