"""Fuzzy match predicate: a length gate followed by a score threshold."""

from typing import Optional, Union

from fuzzymatch._utils import (
    DEFAULT_ERROR_RATE,
    DEFAULT_LENGTH_DIFFERENCE,
    check_str,
    validate_count,
    validate_range,
)
from fuzzymatch.cache import ScoreCache
from fuzzymatch.enums import Algorithm
from fuzzymatch.scoring import Scorer, resolve_scorer


def fuzzy_match(
    s1: str,
    s2: str,
    scorer: Union[str, Algorithm, Scorer] = Algorithm.JARO_WINKLER,
    max_length_difference: int = DEFAULT_LENGTH_DIFFERENCE,
    error_rate: float = DEFAULT_ERROR_RATE,
    cache: Optional[ScoreCache] = None,
) -> bool:
    """
    Decide whether two strings are close enough to count as a match.

    The lengths may differ by at most ``max_length_difference`` and the score
    must reach ``1 - error_rate``. The length check runs first, so strings of
    very different length are rejected without being scored.

    Args:
        s1: First string.
        s2: Second string.
        scorer: Algorithm name, Algorithm member or ``(str, str) -> float``
            callable (default: Jaro-Winkler).
        max_length_difference: Largest accepted ``abs(len(s1) - len(s2))``.
        error_rate: Accepted error, in ``[0.0, 1.0]``.
        cache: Optional ScoreCache used to memoize the score.

    Returns:
        True if both conditions hold.

    Example:
        >>> fuzzy_match("kitten", "kiten")
        True
        >>> fuzzy_match("kitten", "completely-unrelated-long-string")
        False
    """
    check_str("s1", s1)
    check_str("s2", s2)
    max_length_difference = validate_count("max_length_difference", max_length_difference)
    error_rate = validate_range("error_rate", error_rate)

    if abs(len(s1) - len(s2)) > max_length_difference:
        return False

    score_func = resolve_scorer(scorer)
    if cache is None:
        score = score_func(s1, s2)
    else:
        score = cache.score(score_func, s1, s2)
    return score >= 1 - error_rate


__all__ = ["fuzzy_match"]
