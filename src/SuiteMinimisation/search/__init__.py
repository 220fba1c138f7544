"""Search bounded context: multi-objective suite minimisation algorithms."""

from SuiteMinimisation.search.archive import ParetoArchive
from SuiteMinimisation.search.builder import AlgorithmBuilder
from SuiteMinimisation.search.hypervolume import compute_hyper_volume
from SuiteMinimisation.search.nsga2 import NSGA2
from SuiteMinimisation.search.pareto import (
    crowding_distance,
    dominance_matrix,
    dominates,
    fast_non_dominated_sort,
)
from SuiteMinimisation.search.random_search import RandomSearch
from SuiteMinimisation.search.registry import AlgorithmRegistry, default_registry
from SuiteMinimisation.search.selection import BinaryTournamentSelection
from SuiteMinimisation.search.strategy import SearchAlgorithm

__all__ = [
    "AlgorithmBuilder",
    "AlgorithmRegistry",
    "BinaryTournamentSelection",
    "NSGA2",
    "ParetoArchive",
    "RandomSearch",
    "SearchAlgorithm",
    "compute_hyper_volume",
    "crowding_distance",
    "default_registry",
    "dominance_matrix",
    "dominates",
    "fast_non_dominated_sort",
]
