"""Exception types raised by fuzzymatch.

All library errors derive from :class:`FuzzyMatchError`. Parameter errors also
derive from :class:`ValueError` so callers that only expect the builtin keep
working.
"""


class FuzzyMatchError(Exception):
    """Base class for all fuzzymatch errors."""


class ValidationError(FuzzyMatchError, ValueError):
    """A parameter is outside its accepted range (thresholds, limits,
    positions, empty search queries)."""


class AlgorithmError(FuzzyMatchError, ValueError):
    """An unknown scoring algorithm was requested."""


__all__ = ["FuzzyMatchError", "ValidationError", "AlgorithmError"]
