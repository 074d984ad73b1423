"""FuzzyMatcher: one configuration and one score cache behind every operation.

Warning:
    The matcher itself holds no per-call state and its cache is lock
    protected, so a single instance may be shared between threads.
"""

from typing import Iterable, Iterator, List, Optional, Union

from fuzzymatch._utils import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_ERROR_RATE,
    DEFAULT_LENGTH_DIFFERENCE,
    DEFAULT_QUALITY,
    normalize_algorithm,
    validate_count,
    validate_range,
)
from fuzzymatch.cache import CacheInfo, ScoreCache
from fuzzymatch.enums import Algorithm, Direction
from fuzzymatch.matching import fuzzy_match
from fuzzymatch.ranking import MatchResult, rank_abbrev
from fuzzymatch.scoring import Scorer, abbrev_score, resolve_scorer, similarity_score
from fuzzymatch.search import (
    Span,
    TextAccessor,
    as_accessor,
    fuzzy_finditer,
    fuzzy_search,
)


class FuzzyMatcher:
    """
    Fuzzy matching engine with explicit configuration and its own cache.

    The cache is created with the matcher and lives until the matcher is
    garbage collected or :meth:`clear_cache` is called. Two matchers never
    share cached scores.

    Example:
        >>> from fuzzymatch import FuzzyMatcher
        >>> matcher = FuzzyMatcher(accept_error_rate=0.05)
        >>> matcher.match("kitten", "kiten")
        True
        >>> matcher.search("kiten", "alpha\\nkitten\\nomega")
        (6, 12)
    """

    def __init__(
        self,
        score_function: Union[str, Algorithm, Scorer] = Algorithm.JARO_WINKLER,
        accept_error_rate: float = DEFAULT_ERROR_RATE,
        accept_length_difference: int = DEFAULT_LENGTH_DIFFERENCE,
        cache_size: Optional[int] = DEFAULT_CACHE_SIZE,
    ):
        """
        Create a FuzzyMatcher.

        Args:
            score_function: Scorer used by :meth:`match` and the search
                methods: an Algorithm, its name, or a callable.
            accept_error_rate: Matches need a score of at least
                ``1 - accept_error_rate``.
            accept_length_difference: Largest accepted length difference.
            cache_size: Maximum cached scores, or None for no bound.
        """
        self._score_function = score_function
        self._scorer = resolve_scorer(score_function)
        self._error_rate = validate_range("accept_error_rate", accept_error_rate)
        self._length_difference = validate_count(
            "accept_length_difference", accept_length_difference
        )
        self._cache = ScoreCache(maxsize=cache_size)

    @property
    def cache(self) -> ScoreCache:
        return self._cache

    @property
    def accept_error_rate(self) -> float:
        return self._error_rate

    @property
    def accept_length_difference(self) -> int:
        return self._length_difference

    def similarity_score(self, s1: str, s2: str) -> float:
        """Cached Jaro-Winkler similarity."""
        return similarity_score(s1, s2, cache=self._cache)

    def abbrev_score(self, target: str, abbrev: str) -> float:
        """Cached QuickSilver abbreviation score."""
        return abbrev_score(target, abbrev, cache=self._cache)

    def score(self, s1: str, s2: str) -> float:
        """Cached score from the configured score function."""
        return self._cache.score(self._scorer, s1, s2)

    def match(self, s1: str, s2: str) -> bool:
        return fuzzy_match(
            s1,
            s2,
            scorer=self._scorer,
            max_length_difference=self._length_difference,
            error_rate=self._error_rate,
            cache=self._cache,
        )

    def search(
        self,
        query: str,
        text: Union[str, TextAccessor],
        direction: Union[str, Direction] = Direction.FORWARD,
        start: int = 0,
        bound: Optional[int] = None,
    ) -> Optional[Span]:
        """See :func:`fuzzymatch.fuzzy_search`."""
        return fuzzy_search(
            query,
            text,
            direction=direction,
            start=start,
            bound=bound,
            scorer=self._scorer,
            max_length_difference=self._length_difference,
            error_rate=self._error_rate,
            cache=self._cache,
        )

    def search_forward(
        self,
        query: str,
        text: Union[str, TextAccessor],
        start: int = 0,
        bound: Optional[int] = None,
    ) -> Optional[Span]:
        return self.search(query, text, Direction.FORWARD, start, bound)

    def search_backward(
        self,
        query: str,
        text: Union[str, TextAccessor],
        start: Optional[int] = None,
        bound: Optional[int] = None,
    ) -> Optional[Span]:
        accessor = as_accessor(text)
        if start is None:
            start = len(accessor)
        return self.search(query, accessor, Direction.BACKWARD, start, bound)

    def finditer(
        self,
        query: str,
        text: Union[str, TextAccessor],
        start: int = 0,
        bound: Optional[int] = None,
    ) -> Iterator[Span]:
        """See :func:`fuzzymatch.fuzzy_finditer`."""
        return fuzzy_finditer(
            query,
            text,
            start=start,
            bound=bound,
            scorer=self._scorer,
            max_length_difference=self._length_difference,
            error_rate=self._error_rate,
            cache=self._cache,
        )

    def rank_abbrev(
        self,
        candidates: Iterable[str],
        abbrev: str,
        limit: Optional[int] = None,
        timeout: Optional[float] = None,
        quality: float = DEFAULT_QUALITY,
    ) -> List[MatchResult]:
        """See :func:`fuzzymatch.rank_abbrev`."""
        return rank_abbrev(
            candidates,
            abbrev,
            limit=limit,
            timeout=timeout,
            quality=quality,
            cache=self._cache,
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_info(self) -> CacheInfo:
        return self._cache.cache_info()

    def __repr__(self) -> str:
        if callable(self._score_function) and not isinstance(
            self._score_function, (str, Algorithm)
        ):
            name = getattr(self._score_function, "__name__", repr(self._score_function))
        else:
            name = normalize_algorithm(self._score_function)
        return (
            f"FuzzyMatcher(score_function={name!r}, "
            f"accept_error_rate={self._error_rate!r}, "
            f"accept_length_difference={self._length_difference!r}, "
            f"cache_size={self._cache.maxsize!r})"
        )


__all__ = ["FuzzyMatcher"]
