"""Enums for fuzzymatch API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available scoring algorithms.

    This enum provides type-safe scorer selection for matching operations.
    String values are accepted wherever an Algorithm is.

    Example:
        >>> from fuzzymatch import Algorithm, fuzzy_match
        >>> fuzzy_match("kitten", "kiten", scorer=Algorithm.JARO)
        True
    """

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with a common-prefix bonus (default)"""

    QUICKSILVER = "quicksilver"
    """QuickSilver abbreviation score; the second string is the abbreviation"""


class Direction(str, Enum):
    """Search direction for :func:`fuzzymatch.fuzzy_search`."""

    FORWARD = "forward"
    BACKWARD = "backward"


__all__ = ["Algorithm", "Direction"]
