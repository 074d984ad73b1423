"""Tests for the bounded top-K abbreviation ranker."""

import itertools
import time

import pytest

import fuzzymatch as fm

COMMANDS = [
    "find-file",
    "fill-region",
    "font-lock-fontify",
    "forward-word",
    "find-file-other-window",
    "fuzzy-finder",
    "buffer-file-name",
    "ff",
    "offer",
    "fast-forward",
]


def brute_force(candidates, abbrev, limit=None, quality=0.7):
    scored = [(text, fm.abbrev_score(text, abbrev)) for text in candidates]
    kept = [pair for pair in scored if pair[1] >= quality]
    kept.sort(key=lambda pair: -pair[1])
    return kept if limit is None else kept[:limit]


class TestRankAbbrev:
    """Ranking without a timeout."""

    def test_descending_order(self):
        results = fm.rank_abbrev(COMMANDS, "ff", quality=0.0)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_matches_brute_force(self):
        results = fm.rank_abbrev(COMMANDS, "ff")
        assert [(r.text, r.score) for r in results] == brute_force(COMMANDS, "ff")

    @pytest.mark.parametrize("limit", [1, 2, 3, 5, 10, 20])
    def test_limit_keeps_top_k(self, limit):
        results = fm.rank_abbrev(COMMANDS, "ff", limit=limit, quality=0.0)
        assert len(results) <= limit
        assert [(r.text, r.score) for r in results] == brute_force(
            COMMANDS, "ff", limit=limit, quality=0.0
        )

    def test_quality_threshold(self):
        results = fm.rank_abbrev(COMMANDS, "ff", quality=0.8)
        assert results
        assert all(r.score >= 0.8 for r in results)

    def test_exact_match_first(self):
        results = fm.rank_abbrev(COMMANDS, "ff")
        assert results[0].text == "ff"
        assert results[0].score == 1.0

    def test_ids_point_into_input(self):
        for r in fm.rank_abbrev(COMMANDS, "ff", quality=0.0):
            assert COMMANDS[r.id] == r.text

    def test_ties_keep_input_order(self):
        results = fm.rank_abbrev(["abc", "abc", "abc"], "abc", limit=2)
        assert [r.id for r in results] == [0, 1]

    def test_empty_candidates(self):
        assert fm.rank_abbrev([], "ff") == []

    def test_empty_abbrev(self):
        results = fm.rank_abbrev(["a", "b"], "")
        assert [(r.text, r.score) for r in results] == [("a", 0.9), ("b", 0.9)]

    def test_generator_input(self):
        results = fm.rank_abbrev((c for c in COMMANDS), "ff", limit=2)
        assert len(results) == 2


class TestRankAbbrevTimeout:
    """The timeout truncates the iteration and returns partial results."""

    def test_zero_timeout(self):
        results = fm.rank_abbrev(COMMANDS, "ff", timeout=0, quality=0.0)
        full = [(r.text, r.score) for r in fm.rank_abbrev(COMMANDS, "ff", quality=0.0)]
        assert len(results) <= 1
        assert all((r.text, r.score) in full for r in results)

    def test_slow_candidate_does_not_overrun(self):
        long_skip = "a" + "-" * 20000 + "x" + "b"
        start = time.perf_counter()
        results = fm.rank_abbrev([long_skip, "ab"], "ab", timeout=0.01)
        assert time.perf_counter() - start < 0.5
        assert len(results) <= 1

    def test_endless_input_terminates(self):
        endless = itertools.cycle(COMMANDS)
        results = fm.rank_abbrev(endless, "ff", limit=3, timeout=0.05)
        assert len(results) == 3
        assert all(r.score >= 0.7 for r in results)

    def test_generous_timeout_is_complete(self):
        results = fm.rank_abbrev(COMMANDS, "ff", timeout=60)
        assert [(r.text, r.score) for r in results] == brute_force(COMMANDS, "ff")


class TestRankAbbrevCache:
    """Scores come from the cache when one is passed."""

    def test_cache(self):
        cache = fm.ScoreCache()
        first = fm.rank_abbrev(COMMANDS, "ff", cache=cache)
        second = fm.rank_abbrev(COMMANDS, "ff", cache=cache)
        assert first == second
        assert cache.cache_info().hits == len(COMMANDS)


class TestRankAbbrevValidation:
    """Parameter validation."""

    @pytest.mark.parametrize("limit", [0, -1, 2.5])
    def test_bad_limit(self, limit):
        with pytest.raises(fm.ValidationError):
            fm.rank_abbrev(COMMANDS, "ff", limit=limit)

    @pytest.mark.parametrize("timeout", [-1, float("nan"), "1"])
    def test_bad_timeout(self, timeout):
        with pytest.raises(fm.ValidationError):
            fm.rank_abbrev(COMMANDS, "ff", timeout=timeout)

    @pytest.mark.parametrize("quality", [-0.1, 1.1])
    def test_bad_quality(self, quality):
        with pytest.raises(fm.ValidationError):
            fm.rank_abbrev(COMMANDS, "ff", quality=quality)

    def test_non_string_candidate(self):
        with pytest.raises(TypeError):
            fm.rank_abbrev(["ok", None], "o")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
