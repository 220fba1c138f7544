"""Pipeline: repetition runner around the search algorithms."""

from SuiteMinimisation.pipeline.search import RepetitionResult, run_search

__all__ = ["RepetitionResult", "run_search"]
