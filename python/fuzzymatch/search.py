"""Fuzzy search for approximate occurrences of a query inside a text.

A tolerant regular expression proposes candidate regions. Each candidate is
verified with the same length gate and score threshold as
:func:`fuzzymatch.fuzzy_match`, then trimmed to its best-scoring sub-span so
that wildcard padding never spills into neighbouring text. A false positive
restarts the scan one character after the rejected candidate. Backward
searches re-scan a local window forward and keep the best-scoring match,
because the nearest backward regex match is not always the best region.

The text is reached only through the :class:`TextAccessor` protocol, so any
position-addressable, regex-searchable store works: a plain ``str`` is
wrapped in :class:`StringAccessor` automatically.

Example:
    >>> import fuzzymatch as fm
    >>> text = "alpha\\nkitten\\nomega"
    >>> fm.fuzzy_search("kiten", text)
    (6, 12)
    >>> fm.fuzzy_search("kiten", text, direction="backward", start=len(text))
    (6, 12)
"""

import logging
import re
from typing import Iterator, Optional, Pattern, Protocol, Tuple, Union

from fuzzymatch._utils import (
    DEFAULT_ERROR_RATE,
    DEFAULT_LENGTH_DIFFERENCE,
    check_str,
    normalize_direction,
    validate_count,
    validate_range,
)
from fuzzymatch.cache import ScoreCache
from fuzzymatch.enums import Algorithm, Direction
from fuzzymatch.exceptions import ValidationError
from fuzzymatch.scoring import Scorer, resolve_scorer

logger = logging.getLogger(__name__)

Span = Tuple[int, int]


class TextAccessor(Protocol):
    """What fuzzy search needs from the text store.

    Offsets are character positions in ``[0, len(accessor)]``. Both search
    methods return None when ``start`` lies past the searchable range.
    """

    def search_forward(
        self, pattern: Pattern[str], start: int, bound: Optional[int] = None
    ) -> Optional[Span]:
        """Leftmost match beginning at or after ``start`` and ending at or
        before ``bound`` (end of text when None)."""
        ...

    def search_backward(
        self, pattern: Pattern[str], start: int, bound: Optional[int] = None
    ) -> Optional[Span]:
        """Match with the greatest beginning in ``[bound, start)`` that ends
        at or before ``start`` (``bound`` defaults to 0)."""
        ...

    def substring(self, start: int, end: int) -> str:
        ...

    def __len__(self) -> int:
        ...


class StringAccessor:
    """TextAccessor over an in-memory string."""

    def __init__(self, text: str):
        check_str("text", text)
        self._text = text

    def search_forward(
        self, pattern: Pattern[str], start: int, bound: Optional[int] = None
    ) -> Optional[Span]:
        end = len(self._text) if bound is None else min(bound, len(self._text))
        if start > end:
            return None
        m = pattern.search(self._text, start, end)
        return m.span() if m else None

    def search_backward(
        self, pattern: Pattern[str], start: int, bound: Optional[int] = None
    ) -> Optional[Span]:
        low = 0 if bound is None else max(bound, 0)
        for pos in range(min(start, len(self._text)) - 1, low - 1, -1):
            m = pattern.match(self._text, pos, start)
            if m:
                return m.span()
        return None

    def substring(self, start: int, end: int) -> str:
        return self._text[start:end]

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"StringAccessor(size={len(self._text)})"


def as_accessor(text: Union[str, TextAccessor]) -> TextAccessor:
    """Wrap a ``str`` in a StringAccessor; pass other accessors through."""
    if isinstance(text, str):
        return StringAccessor(text)
    for name in ("search_forward", "search_backward", "substring", "__len__"):
        if not hasattr(text, name):
            raise TypeError(
                f"text must be str or provide {name}(), got {type(text).__name__}"
            )
    return text


def _char_class(query: str, i: int) -> str:
    # the character itself plus one neighbour on each side
    chars = dict.fromkeys(query[max(0, i - 1) : i + 2])
    return "[" + "".join(re.escape(c) for c in chars) + "]"


def _alternative(query: str, parity: int, wildcard: str) -> str:
    return "".join(
        _char_class(query, i) if i % 2 == parity else wildcard for i in range(len(query))
    )


def compile_fuzzy_regexp(
    query: str, max_length_difference: int = DEFAULT_LENGTH_DIFFERENCE
) -> Pattern[str]:
    """
    Compile the candidate-proposing pattern for ``query``.

    Every other position must match a character class made of the query
    character and its two neighbours. The positions in between accept any
    run of ``0..max_length_difference`` characters. Two alternatives, one
    anchoring even positions and one anchoring odd positions, are joined so
    that a transposition or insertion near any position still yields a
    candidate. A one-character query uses the even alternative only, since
    the odd one would contain no character class.

    Raises:
        ValidationError: If query is empty.

    Example:
        >>> compile_fuzzy_regexp("abc").pattern
        '(?:[ab].{0,2}[bc])|(?:.{0,2}[abc].{0,2})'
    """
    check_str("query", query)
    if not query:
        raise ValidationError("query must not be empty")
    max_length_difference = validate_count("max_length_difference", max_length_difference)

    wildcard = f".{{0,{max_length_difference}}}"
    even = _alternative(query, 0, wildcard)
    if len(query) == 1:
        return re.compile(even)
    odd = _alternative(query, 1, wildcard)
    return re.compile(f"(?:{even})|(?:{odd})")


def _trim_key(verified: Tuple[float, Span]) -> Tuple[float, int, int]:
    score, (begin, end) = verified
    return score, begin - end, -begin


class _FuzzySearcher:
    """Per-call search state: compiled pattern plus verification settings."""

    def __init__(
        self,
        query: str,
        accessor: TextAccessor,
        scorer: Scorer,
        max_length_difference: int,
        error_rate: float,
        cache: Optional[ScoreCache],
    ):
        self.query = query
        self.accessor = accessor
        self.scorer = scorer
        self.max_length_difference = max_length_difference
        self.error_rate = error_rate
        self.cache = cache
        self.pattern = compile_fuzzy_regexp(query, max_length_difference)

    def score(self, candidate: str) -> Optional[float]:
        """Verification score of ``candidate``, or None if it is rejected."""
        if abs(len(candidate) - len(self.query)) > self.max_length_difference:
            return None
        if self.cache is None:
            score = self.scorer(self.query, candidate)
        else:
            score = self.cache.score(self.scorer, self.query, candidate)
        return score if score >= 1 - self.error_rate else None

    def verify(self, span: Span) -> Optional[Tuple[float, Span]]:
        """Verify a raw candidate and trim it to its best-scoring sub-span.

        Greedy wildcards may pull up to ``max_length_difference`` neighbouring
        characters into either end of a candidate. Sub-spans trimming that
        many characters from each end are scored; the highest score wins,
        then the shortest span, then the leftmost.
        """
        begin, end = span
        candidate = self.accessor.substring(begin, end)
        score = self.score(candidate)
        if score is None:
            logger.debug("Rejected candidate %r at %d for %r", candidate, begin, self.query)
            return None

        best = (score, (begin, end))
        size = len(candidate)
        for left in range(min(self.max_length_difference, size - 1) + 1):
            for right in range(min(self.max_length_difference, size - 1 - left) + 1):
                if not left and not right:
                    continue
                sub_score = self.score(candidate[left : size - right])
                if sub_score is not None:
                    sub = (sub_score, (begin + left, end - right))
                    if _trim_key(sub) > _trim_key(best):
                        best = sub
        return best

    def forward(self, start: int, bound: Optional[int]) -> Optional[Span]:
        pos = start
        while True:
            span = self.accessor.search_forward(self.pattern, pos, bound)
            if span is None:
                return None
            verified = self.verify(span)
            if verified is not None:
                return verified[1]
            pos = span[0] + 1

    def best_verified(self, start: int, bound: int) -> Optional[Span]:
        """Best-scoring verified match scanning forward from ``start``.

        Equal scores go to the later match, the one nearest a backward
        search's starting point.
        """
        best = None
        pos = start
        while True:
            span = self.accessor.search_forward(self.pattern, pos, bound)
            if span is None:
                return None if best is None else best[1]
            verified = self.verify(span)
            if verified is None:
                pos = span[0] + 1
                continue
            if best is None or verified[0] >= best[0]:
                best = verified
            begin, end = verified[1]
            pos = end if end > begin else begin + 1

    def backward(self, start: int, bound: Optional[int]) -> Optional[Span]:
        low = 0 if bound is None else bound
        window = 2 * len(self.query)
        pos = start
        while True:
            span = self.accessor.search_backward(self.pattern, pos, bound)
            if span is None:
                return None
            begin, end = span
            found = self.best_verified(max(low, begin - window), end)
            if found is not None:
                return found
            pos = begin


def _prepare(
    query: str,
    text: Union[str, TextAccessor],
    start: int,
    bound: Optional[int],
    scorer: Union[str, Algorithm, Scorer],
    max_length_difference: int,
    error_rate: float,
    cache: Optional[ScoreCache],
) -> _FuzzySearcher:
    check_str("query", query)
    if not query:
        raise ValidationError("query must not be empty")
    accessor = as_accessor(text)
    start = validate_count("start", start)
    if start > len(accessor):
        raise ValidationError(f"start must be <= {len(accessor)}, got {start}")
    if bound is not None:
        validate_count("bound", bound)
    return _FuzzySearcher(
        query,
        accessor,
        resolve_scorer(scorer),
        validate_count("max_length_difference", max_length_difference),
        validate_range("error_rate", error_rate),
        cache,
    )


def fuzzy_search(
    query: str,
    text: Union[str, TextAccessor],
    direction: Union[str, Direction] = Direction.FORWARD,
    start: int = 0,
    bound: Optional[int] = None,
    scorer: Union[str, Algorithm, Scorer] = Algorithm.JARO_WINKLER,
    max_length_difference: int = DEFAULT_LENGTH_DIFFERENCE,
    error_rate: float = DEFAULT_ERROR_RATE,
    cache: Optional[ScoreCache] = None,
) -> Optional[Span]:
    """
    Find the next fuzzy occurrence of ``query`` in ``text``.

    A verified candidate is trimmed by up to ``max_length_difference``
    characters at each end to its best-scoring sub-span. Backward, the best
    score within the local re-scan window wins; equal scores go to the match
    nearest ``start``.

    Args:
        query: Non-empty string to look for.
        text: A ``str`` or a TextAccessor.
        direction: Direction.FORWARD (default) or Direction.BACKWARD, or
            their string values.
        start: Offset the search starts from.
        bound: Forward: the match must end at or before it. Backward: the
            match must begin at or after it. None means the end or the
            beginning of the text.
        scorer: Scorer used to verify candidates (default: Jaro-Winkler).
        max_length_difference: Accepted length difference, also the longest
            wildcard run in the candidate pattern.
        error_rate: Verification threshold is ``1 - error_rate``.
        cache: Optional ScoreCache for verification scores.

    Returns:
        ``(start, end)`` of the verified match, or None when there is none.

    Raises:
        ValidationError: If query is empty or an offset is out of range.
    """
    direction = normalize_direction(direction)
    searcher = _prepare(
        query, text, start, bound, scorer, max_length_difference, error_rate, cache
    )
    if direction is Direction.FORWARD:
        return searcher.forward(start, bound)
    return searcher.backward(start, bound)


def search_forward(
    query: str, text: Union[str, TextAccessor], start: int = 0, **kwargs
) -> Optional[Span]:
    """Shortcut for ``fuzzy_search(query, text, Direction.FORWARD, start, ...)``."""
    return fuzzy_search(query, text, Direction.FORWARD, start, **kwargs)


def search_backward(
    query: str, text: Union[str, TextAccessor], start: Optional[int] = None, **kwargs
) -> Optional[Span]:
    """Shortcut for a backward search; ``start`` defaults to the end of text."""
    accessor = as_accessor(text)
    if start is None:
        start = len(accessor)
    return fuzzy_search(query, accessor, Direction.BACKWARD, start, **kwargs)


def fuzzy_finditer(
    query: str,
    text: Union[str, TextAccessor],
    start: int = 0,
    bound: Optional[int] = None,
    scorer: Union[str, Algorithm, Scorer] = Algorithm.JARO_WINKLER,
    max_length_difference: int = DEFAULT_LENGTH_DIFFERENCE,
    error_rate: float = DEFAULT_ERROR_RATE,
    cache: Optional[ScoreCache] = None,
) -> Iterator[Span]:
    """
    Yield every non-overlapping verified occurrence of ``query``, left to right.

    Example:
        >>> list(fuzzy_finditer("color", "color\\ncolour\\ncolr"))
        [(0, 5), (6, 12), (13, 17)]
    """
    searcher = _prepare(
        query, text, start, bound, scorer, max_length_difference, error_rate, cache
    )
    size = len(searcher.accessor)
    pos = start
    while pos <= size:
        span = searcher.forward(pos, bound)
        if span is None:
            return
        yield span
        begin, end = span
        pos = end if end > begin else begin + 1


__all__ = [
    "Span",
    "StringAccessor",
    "TextAccessor",
    "as_accessor",
    "compile_fuzzy_regexp",
    "fuzzy_finditer",
    "fuzzy_search",
    "search_backward",
    "search_forward",
]
