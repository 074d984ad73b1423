"""String scorers: Jaro, Jaro-Winkler and the QuickSilver abbreviation score.

Every scorer here is a pure function of its string arguments and returns a
float in ``[0.0, 1.0]`` for any pair of strings, so results can be memoized
by :class:`fuzzymatch.cache.ScoreCache`.

Example:
    >>> import fuzzymatch as fm
    >>> round(fm.jaro_winkler_similarity("MARTHA", "MARHTA"), 3)
    0.961
    >>> round(fm.quicksilver_score("FooBarBaz", "fbb"), 3)
    0.911
"""

from typing import TYPE_CHECKING, Callable, List, Optional, Union

from fuzzymatch._utils import (
    DEFAULT_PREFIX_WEIGHT,
    MAX_PREFIX_WEIGHT,
    check_str,
    normalize_algorithm,
    validate_range,
)
from fuzzymatch.enums import Algorithm

if TYPE_CHECKING:
    from fuzzymatch.cache import ScoreCache

Scorer = Callable[[str, str], float]

# Longest common prefix that earns the Winkler bonus
MAX_PREFIX_LENGTH = 4

EMPTY_ABBREV_SCORE = 0.9
SKIP_DISCOUNT = 0.15
REST_WEIGHT = 0.9

SEPARATORS = " \t\r\n_-"


def _jaro(s1: str, s2: str) -> float:
    l1, l2 = len(s1), len(s2)
    if not l1 or not l2:
        return 0.0

    radius = max(1, max(l1, l2) // 2 - 1)
    used = [False] * l2
    matched1 = []
    for i, c in enumerate(s1):
        for j in range(max(0, i - radius), min(l2, i + radius + 1)):
            if not used[j] and s2[j] == c:
                used[j] = True
                matched1.append(c)
                break

    m = len(matched1)
    if m == 0:
        return 0.0

    matched2 = [c for c, hit in zip(s2, used) if hit]
    t = sum(1 for a, b in zip(matched1, matched2) if a != b)
    return (m / l1 + m / l2 + (m - t / 2) / m) / 3


def jaro_similarity(s1: str, s2: str) -> float:
    """Jaro similarity of two strings.

    Two empty strings share no matching characters and score 0.0.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        Similarity in ``[0.0, 1.0]``.
    """
    check_str("s1", s1)
    check_str("s2", s2)
    return _jaro(s1, s2)


def jaro_winkler_similarity(
    s1: str, s2: str, prefix_weight: float = DEFAULT_PREFIX_WEIGHT
) -> float:
    """Jaro-Winkler similarity of two strings.

    The Jaro score is raised by ``p * prefix_weight * (1 - jaro)`` where ``p``
    is the length of the common prefix, counted up to four characters.

    Args:
        s1: First string.
        s2: Second string.
        prefix_weight: Bonus per common prefix character, in ``[0.0, 0.25]``.

    Returns:
        Similarity in ``[0.0, 1.0]``.

    Raises:
        ValidationError: If prefix_weight is outside ``[0.0, 0.25]``.

    Example:
        >>> round(jaro_winkler_similarity("DIXON", "DICKSONX"), 3)
        0.813
    """
    check_str("s1", s1)
    check_str("s2", s2)
    prefix_weight = validate_range("prefix_weight", prefix_weight, 0.0, MAX_PREFIX_WEIGHT)

    dj = _jaro(s1, s2)
    if dj == 0.0:
        return 0.0

    p = 0
    for a, b in zip(s1[:MAX_PREFIX_LENGTH], s2[:MAX_PREFIX_LENGTH]):
        if a != b:
            break
        p += 1
    return dj + p * prefix_weight * (1 - dj)


def abbrev_match_positions(target: str, abbrev: str) -> Optional[List[int]]:
    """Leftmost case-insensitive alignment of ``abbrev`` inside ``target``.

    Each abbreviation character is matched, in order, at the earliest target
    position after the previous match. This is the alignment found by the
    regular expression ``^.*?(a).*?(b)...``, computed in a single pass.

    Returns:
        Target indices of the matched characters, or None if ``abbrev`` is not
        a subsequence of ``target`` (ignoring case).

    Example:
        >>> abbrev_match_positions("FooBarBaz", "fbb")
        [0, 3, 6]
    """
    check_str("target", target)
    check_str("abbrev", abbrev)
    # lowered per character so indices stay aligned with target
    lowered = [c.lower() for c in target]
    positions = []
    pos = 0
    for c in abbrev:
        try:
            pos = lowered.index(c.lower(), pos)
        except ValueError:
            return None
        positions.append(pos)
        pos += 1
    return positions


def abbrev_penalty(target: str, start: int, end: int) -> float:
    """Discount applied to the characters skipped in ``target[start:end]``.

    - A skipped run ending in separators (space, tab, CR, LF, ``_``, ``-``)
      costs one per separator and 0.15 per other character.
    - A skip landing on an uppercase character costs one per uppercase
      character skipped and 0.15 per other character.
    - Any other skip costs one per character.
    """
    skipped = end - start
    if skipped == 0:
        return 0
    segment = target[start:end]
    seps = len(segment) - len(segment.rstrip(SEPARATORS))
    if seps:
        return seps + SKIP_DISCOUNT * (skipped - seps)
    if end < len(target) and target[end].isupper():
        ups = sum(1 for c in target[start:end] if c.isupper())
        return ups + SKIP_DISCOUNT * (skipped - ups)
    return skipped


def quicksilver_score(target: str, abbrev: str) -> float:
    """QuickSilver-style score of ``abbrev`` as an abbreviation of ``target``.

    Matches on word, camelCase and separator boundaries score close to 1.0.
    Abbreviations that skip over characters inside a word score lower.

    Args:
        target: The candidate string.
        abbrev: The abbreviation typed by the user.

    Returns:
        0.9 for an empty abbreviation, 0.0 when ``abbrev`` is longer than
        ``target`` or is not a subsequence of it, otherwise a score in
        ``[0.0, 1.0]``.
    """
    check_str("target", target)
    check_str("abbrev", abbrev)
    if not abbrev:
        return EMPTY_ABBREV_SCORE
    if len(target) < len(abbrev):
        return 0.0

    positions = abbrev_match_positions(target, abbrev)
    if positions is None:
        return 0.0

    point = 0.0
    prev = 0
    for start in positions:
        skipped = start - prev
        point += 1 + (skipped - abbrev_penalty(target, prev, start))
        prev = start + 1
    rest = len(target) - prev
    return (point + rest * REST_WEIGHT) / len(target)


def similarity_score(s1: str, s2: str, cache: Optional["ScoreCache"] = None) -> float:
    """Jaro-Winkler similarity, memoized in ``cache`` when one is given."""
    if cache is None:
        return jaro_winkler_similarity(s1, s2)
    return cache.score(jaro_winkler_similarity, s1, s2)


def abbrev_score(target: str, abbrev: str, cache: Optional["ScoreCache"] = None) -> float:
    """QuickSilver abbreviation score, memoized in ``cache`` when one is given."""
    if cache is None:
        return quicksilver_score(target, abbrev)
    return cache.score(quicksilver_score, target, abbrev)


_SCORERS = {
    Algorithm.JARO.value: jaro_similarity,
    Algorithm.JARO_WINKLER.value: jaro_winkler_similarity,
    Algorithm.QUICKSILVER.value: quicksilver_score,
}


def resolve_scorer(algorithm: Union[str, Algorithm, Scorer]) -> Scorer:
    """Turn an algorithm name, an Algorithm member or a callable into a scorer.

    Raises:
        AlgorithmError: If the name is not recognized.
        TypeError: If algorithm is none of the accepted types.
    """
    if callable(algorithm) and not isinstance(algorithm, (str, Algorithm)):
        return algorithm
    return _SCORERS[normalize_algorithm(algorithm)]


__all__ = [
    "Scorer",
    "abbrev_match_positions",
    "abbrev_penalty",
    "abbrev_score",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "quicksilver_score",
    "resolve_scorer",
    "similarity_score",
]
