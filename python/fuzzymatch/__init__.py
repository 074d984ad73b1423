"""
fuzzymatch - Fuzzy completion, fuzzy search and abbreviation ranking

A Python library for approximate string matching in interactive tools:
Jaro-Winkler similarity, QuickSilver-style abbreviation scoring, a
regex-assisted fuzzy search over text buffers and a time-bounded top-K ranker.

Example usage:
    >>> import fuzzymatch as fm

    # Simple similarity
    >>> round(fm.similarity_score("MARTHA", "MARHTA"), 3)
    0.961

    # Yes/no matching with the default thresholds
    >>> fm.fuzzy_match("kitten", "kiten")
    True

    # Fuzzy search in a text, forward or backward
    >>> fm.fuzzy_search("kiten", "alpha\\nkitten\\nomega")
    (6, 12)

    # Rank commands by abbreviation (returns MatchResult objects)
    >>> results = fm.rank_abbrev(["find-file", "font-lock-fontify"], "ff", limit=1)
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('font-lock-fontify', 0.84)]

    # An engine owning its configuration and score cache
    >>> matcher = fm.FuzzyMatcher(accept_error_rate=0.05)
    >>> matcher.match("kitten", "kiten")
    True
"""

import logging
from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzymatch.expr  # noqa: F401
from fuzzymatch.cache import CacheInfo, ScoreCache
from fuzzymatch.engine import FuzzyMatcher
from fuzzymatch.enums import Algorithm, Direction
from fuzzymatch.exceptions import AlgorithmError, FuzzyMatchError, ValidationError
from fuzzymatch.matching import fuzzy_match
from fuzzymatch.ranking import MatchResult, rank_abbrev
from fuzzymatch.scoring import (
    abbrev_match_positions,
    abbrev_penalty,
    abbrev_score,
    jaro_similarity,
    jaro_winkler_similarity,
    quicksilver_score,
    resolve_scorer,
    similarity_score,
)
from fuzzymatch.search import (
    StringAccessor,
    TextAccessor,
    compile_fuzzy_regexp,
    fuzzy_finditer,
    fuzzy_search,
    search_backward,
    search_forward,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzymatch")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyMatchError",
    "ValidationError",
    "AlgorithmError",
    # Enums
    "Algorithm",
    "Direction",
    # Scorers
    "similarity_score",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "abbrev_score",
    "quicksilver_score",
    "abbrev_match_positions",
    "abbrev_penalty",
    "resolve_scorer",
    # Cache
    "ScoreCache",
    "CacheInfo",
    # Matching and search
    "fuzzy_match",
    "fuzzy_search",
    "search_forward",
    "search_backward",
    "fuzzy_finditer",
    "compile_fuzzy_regexp",
    "TextAccessor",
    "StringAccessor",
    # Ranking
    "MatchResult",
    "rank_abbrev",
    # Engine
    "FuzzyMatcher",
]
