"""Bounded, thread-safe memoization of string scores.

A :class:`ScoreCache` maps ``(scorer, a, b)`` to the score the scorer returned
for ``(a, b)``. Scorers are pure, so dropping an entry only costs a
recomputation and never changes a result.

There is no process-wide cache. Each :class:`fuzzymatch.FuzzyMatcher` creates
its own, and the module-level functions take an optional ``cache`` argument.

Example:
    >>> from fuzzymatch import ScoreCache, jaro_winkler_similarity
    >>> cache = ScoreCache(maxsize=1024)
    >>> round(cache.score(jaro_winkler_similarity, "hello", "hallo"), 2)
    0.88
    >>> cache.cache_info()
    CacheInfo(hits=0, misses=1, maxsize=1024, currsize=1)
"""

import logging
import threading
from collections import OrderedDict
from typing import Callable, Hashable, NamedTuple, Optional, Tuple

from fuzzymatch._utils import DEFAULT_CACHE_SIZE, validate_count

logger = logging.getLogger(__name__)

CacheKey = Tuple[Callable[[str, str], float], str, str]


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: Optional[int]
    currsize: int


class ScoreCache:
    """
    Least-recently-used cache of scorer results.

    The table is guarded by a lock, so one cache may be shared between
    threads. Scores are computed outside the lock: two threads missing on the
    same key both compute it and store the same value.

    Args:
        maxsize: Maximum number of entries, or None for an unbounded cache.
    """

    def __init__(self, maxsize: Optional[int] = DEFAULT_CACHE_SIZE):
        if maxsize is not None:
            maxsize = validate_count("maxsize", maxsize, minimum=1)
        self._maxsize = maxsize
        self._data: "OrderedDict[Hashable, float]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def score(self, scorer: Callable[[str, str], float], a: str, b: str) -> float:
        """Return ``scorer(a, b)``, computing and storing it on a miss."""
        key = (scorer, a, b)
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self._misses += 1
            else:
                self._hits += 1
                self._data.move_to_end(key)
                return value

        value = scorer(a, b)

        with self._lock:
            if key not in self._data:
                self._data[key] = value
                if self._maxsize is not None and len(self._data) > self._maxsize:
                    self._data.popitem(last=False)
        return value

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""
        with self._lock:
            size = len(self._data)
            self._data.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Cleared score cache (%d entries)", size)

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, self._maxsize, len(self._data))

    @property
    def maxsize(self) -> Optional[int]:
        return self._maxsize

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"ScoreCache(maxsize={self._maxsize!r}, size={len(self)})"


__all__ = ["CacheInfo", "ScoreCache"]
