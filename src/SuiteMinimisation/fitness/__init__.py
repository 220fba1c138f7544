"""Fitness bounded context: objective functions and evaluation budgets."""

from SuiteMinimisation.fitness.functions import (
    CoverageFitness,
    FitnessFunction,
    SizeFitness,
    check_objective_directions,
    evaluate,
)
from SuiteMinimisation.fitness.stopping import MaxFitnessEvaluations, StoppingCondition

__all__ = [
    "CoverageFitness",
    "FitnessFunction",
    "MaxFitnessEvaluations",
    "SizeFitness",
    "StoppingCondition",
    "check_objective_directions",
    "evaluate",
]
