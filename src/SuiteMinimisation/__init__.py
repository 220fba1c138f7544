"""Multi-objective test suite minimisation: smallest suites, highest coverage."""

from SuiteMinimisation.chromosomes import (
    BitFlipMutation,
    SinglePointCrossover,
    TestSuiteChromosome,
    TestSuiteChromosomeGenerator,
)
from SuiteMinimisation.fitness import CoverageFitness, MaxFitnessEvaluations, SizeFitness
from SuiteMinimisation.pipeline import RepetitionResult, run_search
from SuiteMinimisation.search import (
    NSGA2,
    AlgorithmBuilder,
    ParetoArchive,
    RandomSearch,
    compute_hyper_volume,
    default_registry,
)
from SuiteMinimisation.shared.config import SearchConfig
from SuiteMinimisation.shared.errors import (
    FitnessError,
    InvalidArgumentError,
    SearchError,
    SuiteMinimisationError,
)

__all__ = [
    "NSGA2",
    "AlgorithmBuilder",
    "BitFlipMutation",
    "CoverageFitness",
    "FitnessError",
    "InvalidArgumentError",
    "MaxFitnessEvaluations",
    "ParetoArchive",
    "RandomSearch",
    "RepetitionResult",
    "SearchConfig",
    "SearchError",
    "SinglePointCrossover",
    "SizeFitness",
    "SuiteMinimisationError",
    "TestSuiteChromosome",
    "TestSuiteChromosomeGenerator",
    "compute_hyper_volume",
    "default_registry",
    "run_search",
]
