"""Reference correctness tests comparing fuzzymatch against jellyfish.

jellyfish floors the transposition count and only applies the Winkler boost
above a Jaro score of 0.7, so agreement is checked on the published vectors
and, for Jaro, up to the half-transposition jellyfish drops.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, assume, given, settings

import fuzzymatch as fm

# Import jellyfish as reference implementation
try:
    import jellyfish

    HAS_JELLYFISH = True
except ImportError:
    HAS_JELLYFISH = False


# Strategy for ASCII strings (avoiding unicode edge cases in reference comparison)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=30
)

REFERENCE_PAIRS = [
    ("MARTHA", "MARHTA"),
    ("DWAYNE", "DUANE"),
    ("DIXON", "DICKSONX"),
    ("kitten", "kitten"),
    ("abcdef", "uvwxyz"),
]


@pytest.mark.skipif(not HAS_JELLYFISH, reason="jellyfish not installed")
class TestJaroReference:
    """Test Jaro and Jaro-Winkler against jellyfish reference."""

    @pytest.mark.parametrize("a,b", REFERENCE_PAIRS)
    def test_jaro_vectors_match_jellyfish(self, a: str, b: str):
        assert fm.jaro_similarity(a, b) == pytest.approx(jellyfish.jaro_similarity(a, b))

    @pytest.mark.parametrize("a,b", REFERENCE_PAIRS)
    def test_jaro_winkler_vectors_match_jellyfish(self, a: str, b: str):
        expected = jellyfish.jaro_winkler_similarity(a, b)
        assert fm.jaro_winkler_similarity(a, b) == pytest.approx(expected)

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_jaro_within_half_transposition(self, a: str, b: str):
        """Both sides share the window once the longer string has 4+ characters."""
        assume(max(len(a), len(b)) >= 4)
        expected = jellyfish.jaro_similarity(a, b)
        actual = fm.jaro_similarity(a, b)
        # Flooring t/2 can only raise the reference score
        assert actual <= expected + 1e-9, f"Mismatch for ({a!r}, {b!r})"
        assert expected - actual <= 1 / 6 + 1e-9, f"Mismatch for ({a!r}, {b!r})"

    @given(ascii_text)
    @settings(max_examples=100)
    def test_identity_agrees(self, a: str):
        assume(a)
        assert fm.jaro_similarity(a, a) == pytest.approx(jellyfish.jaro_similarity(a, a))
