"""Property-based tests for fuzzymatch using Hypothesis.

These tests verify properties that should hold for all inputs:
- Symmetry: similarity(a, b) == similarity(b, a)
- Identity: similarity(a, a) == 1.0 for non-empty a
- Bounds: 0.0 <= score <= 1.0 for every scorer
- Caching: cached and uncached scores are identical
- Ranking: top-K equals a brute-force top-K
"""

from hypothesis import given, settings
from hypothesis import strategies as st

import fuzzymatch as fm

text_strategy = st.text(max_size=60, alphabet=st.characters(blacklist_categories=["Cs"]))
word_strategy = st.text(
    alphabet=st.sampled_from("abcABC-_ xyz"), min_size=0, max_size=20
)


class TestSimilaritySymmetry:
    """similarity(a, b) == similarity(b, a)."""

    @given(text_strategy, text_strategy)
    @settings(max_examples=200)
    def test_jaro_symmetry(self, a: str, b: str):
        assert fm.jaro_similarity(a, b) == fm.jaro_similarity(b, a)

    @given(text_strategy, text_strategy)
    @settings(max_examples=200)
    def test_jaro_winkler_symmetry(self, a: str, b: str):
        assert fm.jaro_winkler_similarity(a, b) == fm.jaro_winkler_similarity(b, a)

    @given(word_strategy, word_strategy)
    @settings(max_examples=200)
    def test_jaro_winkler_symmetry_small_alphabet(self, a: str, b: str):
        # many repeated characters exercise the matching window
        assert fm.jaro_winkler_similarity(a, b) == fm.jaro_winkler_similarity(b, a)


class TestSimilarityIdentity:
    """similarity(a, a) == 1.0 for non-empty strings."""

    @given(st.text(min_size=1, max_size=100))
    @settings(max_examples=100)
    def test_jaro_winkler_identity(self, s: str):
        assert fm.jaro_winkler_similarity(s, s) == 1.0

    @given(st.text(min_size=1, max_size=100))
    @settings(max_examples=100)
    def test_abbrev_identity(self, s: str):
        assert fm.abbrev_score(s, s) == 1.0


class TestScoreBounds:
    """0.0 <= score <= 1.0."""

    @given(text_strategy, text_strategy)
    @settings(max_examples=200)
    def test_jaro_winkler_bounds(self, a: str, b: str):
        assert 0.0 <= fm.jaro_winkler_similarity(a, b) <= 1.0

    @given(text_strategy, text_strategy, st.floats(min_value=0.0, max_value=0.25))
    @settings(max_examples=100)
    def test_jaro_winkler_bounds_any_weight(self, a: str, b: str, weight: float):
        assert 0.0 <= fm.jaro_winkler_similarity(a, b, prefix_weight=weight) <= 1.0

    @given(text_strategy, st.text(max_size=10))
    @settings(max_examples=200)
    def test_abbrev_bounds(self, target: str, abbrev: str):
        assert 0.0 <= fm.abbrev_score(target, abbrev) <= 1.0

    @given(word_strategy, st.text(alphabet=st.sampled_from("abcABC-_ "), max_size=5))
    @settings(max_examples=200)
    def test_abbrev_bounds_boundary_heavy(self, target: str, abbrev: str):
        assert 0.0 <= fm.abbrev_score(target, abbrev) <= 1.0


class TestAbbrevDefaults:
    """Fixed abbreviation scores."""

    @given(st.text(min_size=1, max_size=50))
    def test_empty_abbrev(self, s: str):
        assert fm.abbrev_score(s, "") == 0.9

    @given(st.text(max_size=20), st.text(min_size=1, max_size=20))
    def test_longer_abbrev(self, s: str, extra: str):
        assert fm.abbrev_score(s, s + extra) == 0.0


class TestCacheIdempotence:
    """Cached results are bit-identical to fresh ones."""

    @given(st.lists(st.tuples(word_strategy, word_strategy), max_size=20))
    @settings(max_examples=50)
    def test_cached_scores(self, pairs):
        cache = fm.ScoreCache(maxsize=8)
        for _ in range(2):
            for a, b in pairs:
                assert fm.similarity_score(a, b, cache=cache) == fm.jaro_winkler_similarity(a, b)
                assert fm.abbrev_score(a, b, cache=cache) == fm.quicksilver_score(a, b)


class TestFuzzyMatchConsistency:
    """fuzzy_match agrees with its two conditions."""

    @given(word_strategy, word_strategy)
    @settings(max_examples=200)
    def test_definition(self, a: str, b: str):
        expected = abs(len(a) - len(b)) <= 2 and fm.jaro_winkler_similarity(a, b) >= 1 - 0.1
        assert fm.fuzzy_match(a, b) == expected


class TestRankingProperties:
    """The ranker keeps the best candidates, not the first ones."""

    @given(
        st.lists(word_strategy, max_size=15),
        st.text(alphabet=st.sampled_from("abc"), max_size=3),
        st.integers(min_value=1, max_value=6),
        st.floats(min_value=0.0, max_value=1.0),
    )
    @settings(max_examples=100)
    def test_top_k(self, candidates, abbrev, limit, quality):
        results = fm.rank_abbrev(candidates, abbrev, limit=limit, quality=quality)
        assert len(results) <= limit
        assert all(r.score >= quality for r in results)

        scored = [(c, fm.abbrev_score(c, abbrev)) for c in candidates]
        expected = sorted((p for p in scored if p[1] >= quality), key=lambda p: -p[1])[:limit]
        assert [(r.text, r.score) for r in results] == expected


class TestSearchProperties:
    """A query embedded in unrelated text is found where it was put."""

    @given(
        st.text(alphabet=st.sampled_from("abcdefgh"), min_size=3, max_size=10),
        st.integers(min_value=0, max_value=20),
    )
    @settings(max_examples=100)
    def test_exact_occurrence_is_found(self, query: str, padding: int):
        text = "0" * padding + "\n" + query + "\n" + "9" * padding
        span = fm.fuzzy_search(query, text)
        assert span is not None
        assert span == (padding + 1, padding + 1 + len(query))
