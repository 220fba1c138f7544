"""Chromosomes bounded context: suite encoding and variation operators."""

from SuiteMinimisation.chromosomes.chromosome import TestSuiteChromosome
from SuiteMinimisation.chromosomes.crossover import SinglePointCrossover
from SuiteMinimisation.chromosomes.generator import (
    TestSuiteChromosomeGenerator,
    sample_suite_genes,
)
from SuiteMinimisation.chromosomes.mutation import BitFlipMutation
from SuiteMinimisation.chromosomes.ports import (
    ChromosomeGenerator,
    Crossover,
    IdentityCrossover,
    IdentityMutation,
    Mutation,
)

__all__ = [
    "BitFlipMutation",
    "ChromosomeGenerator",
    "Crossover",
    "IdentityCrossover",
    "IdentityMutation",
    "Mutation",
    "SinglePointCrossover",
    "TestSuiteChromosome",
    "TestSuiteChromosomeGenerator",
    "sample_suite_genes",
]
