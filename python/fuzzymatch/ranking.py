"""Streaming top-K ranking of candidates by QuickSilver abbreviation score.

:func:`rank_abbrev` scores candidates one by one, keeps the best ``limit`` of
them in a sorted working list, and can stop early when a wall-clock timeout
expires. A timeout is not an error: whatever was ranked so far is returned.

Example:
    >>> import fuzzymatch as fm
    >>> results = fm.rank_abbrev(["find-file", "fill-region", "font-lock-fontify"], "ff")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('font-lock-fontify', 0.84), ('find-file', 0.81)]
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from fuzzymatch._utils import (
    DEFAULT_QUALITY,
    check_str,
    validate_count,
    validate_range,
    validate_timeout,
)
from fuzzymatch.cache import ScoreCache
from fuzzymatch.scoring import abbrev_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """A ranked candidate.

    Attributes:
        text: The candidate string.
        score: Its abbreviation score.
        id: Position of the candidate in the input sequence.
    """

    text: str
    score: float
    id: int


def _insert_sorted(working: List[MatchResult], entry: MatchResult) -> None:
    # ascending by score; a new entry goes below existing ties
    i = len(working)
    while i > 0 and working[i - 1].score >= entry.score:
        i -= 1
    working.insert(i, entry)


def rank_abbrev(
    candidates: Iterable[str],
    abbrev: str,
    limit: Optional[int] = None,
    timeout: Optional[float] = None,
    quality: float = DEFAULT_QUALITY,
    cache: Optional[ScoreCache] = None,
) -> List[MatchResult]:
    """
    Rank candidates by how well ``abbrev`` abbreviates them.

    Candidates are scored in input order. Those scoring at least ``quality``
    enter a working list kept sorted by score; once it holds more than
    ``limit`` entries the lowest one is dropped. The clock is checked after
    every candidate and the loop stops as soon as ``timeout`` seconds have
    passed, without interrupting the scoring of a single candidate.

    Args:
        candidates: Strings to rank.
        abbrev: The abbreviation.
        limit: Maximum number of results, or None for no limit.
        timeout: Wall-clock budget in seconds, or None for no budget.
        quality: Minimum score for a candidate to be kept.
        cache: Optional ScoreCache for abbreviation scores.

    Returns:
        MatchResult list sorted by score, highest first. Equal scores keep
        input order.

    Raises:
        ValidationError: If limit, timeout or quality is out of range.
    """
    check_str("abbrev", abbrev)
    if limit is not None:
        limit = validate_count("limit", limit, minimum=1)
    timeout = validate_timeout(timeout)
    quality = validate_range("quality", quality)

    deadline = None if timeout is None else time.monotonic() + timeout
    working: List[MatchResult] = []
    processed = 0

    for idx, text in enumerate(candidates):
        score = abbrev_score(text, abbrev, cache=cache)
        processed += 1
        if score >= quality:
            if limit is None or len(working) < limit or score > working[0].score:
                _insert_sorted(working, MatchResult(text, score, idx))
                if limit is not None and len(working) > limit:
                    working.pop(0)
        if deadline is not None and time.monotonic() >= deadline:
            logger.debug(
                "rank_abbrev timed out after %d candidates (%d kept)",
                processed,
                len(working),
            )
            break

    working.reverse()
    return working


__all__ = ["MatchResult", "rank_abbrev"]
