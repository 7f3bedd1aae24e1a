"""
Tests for Strength Analysis
===========================
Tests for passforge/analyzers/strength.py and crack_time.py.
"""

import math

import pytest

from passforge.analyzers import (
    StrengthAnalyzer,
    analyze,
    estimate_crack_time,
    expected_crack_seconds,
    format_crack_time,
)
from passforge.analyzers.strength import (
    SUGGEST_AVOID_COMMON,
    SUGGEST_DIGITS,
    SUGGEST_LENGTH,
    SUGGEST_LOWER,
    SUGGEST_PASSPHRASE,
    SUGGEST_SYMBOLS,
    SUGGEST_UPPER,
)
from passforge.core.exceptions import EmptyInput
from passforge.core.models import Strength


class TestCharsetInference:
    """Tests for charset size and entropy."""

    @pytest.mark.parametrize("password,size", [
        ("abc", 26),
        ("ABC", 26),
        ("123", 10),
        ("!!", 32),
        ("aB3", 62),
        ("aB3!", 94),
        ("é", 32),
    ])
    def test_charset_size(self, password, size):
        assert StrengthAnalyzer.charset_size(password) == size

    def test_entropy_formula(self):
        assert StrengthAnalyzer.entropy("aB3!aB3!") == pytest.approx(8 * math.log2(94))


class TestAnalyze:
    """Tests for the full analysis."""

    def test_common_password_is_very_weak(self):
        """Denylisted passwords are very weak regardless of entropy."""
        result = analyze("password")
        assert result.strength is Strength.VERY_WEAK
        assert SUGGEST_AVOID_COMMON in result.suggestions

    def test_common_check_is_case_insensitive(self):
        assert analyze("PassWord").strength is Strength.VERY_WEAK

    def test_short_lowercase_scores(self):
        """'abc': 3*log2(26) bits, short and single-class penalties."""
        result = analyze("abc")
        # 14.1 bits * 1.5 = 21.15, -10 short, -5 all lowercase
        assert result.score == 6
        assert result.strength is Strength.VERY_WEAK
        assert result.crack_time == "instant"
        assert result.suggestions == (
            SUGGEST_LENGTH,
            SUGGEST_UPPER,
            SUGGEST_DIGITS,
            SUGGEST_SYMBOLS,
            SUGGEST_PASSPHRASE,
        )

    def test_strong_mixed_password(self):
        """A long four-class password is at least strong with full score."""
        result = analyze("Tr0ub4dor&3xyzQ!")
        assert result.strength in (Strength.STRONG, Strength.VERY_STRONG)
        assert result.score == 100
        assert result.suggestions == ()

    def test_very_strong_band(self):
        pw = "Ab1!" * 5
        result = analyze(pw)
        assert result.entropy_bits >= 128
        assert result.strength is Strength.VERY_STRONG
        assert result.crack_time == "centuries"

    @pytest.mark.parametrize("bits,expected", [
        (27.9, Strength.VERY_WEAK),
        (28.0, Strength.WEAK),
        (36.0, Strength.FAIR),
        (60.0, Strength.STRONG),
        (128.0, Strength.VERY_STRONG),
    ])
    def test_band_boundaries(self, bits, expected):
        """Band floors are inclusive."""
        assert StrengthAnalyzer._rate(bits, common=False) is expected

    def test_score_clamped(self):
        for pw in ("a", "1", "x" * 200, "Ab1!" * 50):
            assert 0 <= analyze(pw).score <= 100

    def test_digits_only_suggestions(self):
        result = analyze("12345678901234")
        assert SUGGEST_UPPER in result.suggestions
        assert SUGGEST_LOWER in result.suggestions
        assert SUGGEST_LENGTH not in result.suggestions

    @pytest.mark.parametrize("password", ["", None])
    def test_empty_input(self, password):
        with pytest.raises(EmptyInput):
            analyze(password)

    def test_summary_excludes_password(self):
        summary = analyze("hunter2").to_summary()
        assert "password" not in summary
        assert set(summary) == {"score", "entropy", "crack_time", "strength", "suggestions"}

    def test_custom_guess_rate(self):
        """A slower attacker takes longer."""
        slow = StrengthAnalyzer(guesses_per_second=1.0).analyze("abcdef")
        assert slow.crack_time != "instant"

    def test_invalid_guess_rate(self):
        with pytest.raises(ValueError):
            StrengthAnalyzer(guesses_per_second=0)


class TestAnalysisProperties:
    """Properties that hold for any input."""

    @pytest.mark.parametrize("password", [
        "a",
        "password",
        "Tr0ub4dor&3",
        "  spaced out  ",
        "ünïcødé-✓",
        "x" * 300,
    ])
    def test_password_echoed_unchanged(self, password):
        """Analysis never alters the password it reports on."""
        result = analyze(password)
        assert result.password == password
        assert analyze(result.password) == result

    @pytest.mark.parametrize("unit", ["a", "aB", "aB1", "aB1!", "7", "é"])
    def test_entropy_grows_with_length(self, unit):
        """With the character mix fixed, each extra repeat adds entropy."""
        bits = [StrengthAnalyzer.entropy(unit * k) for k in range(1, 9)]
        assert all(shorter < longer for shorter, longer in zip(bits, bits[1:]))

    @pytest.mark.parametrize("unit", ["ab", "aB1!", "Zz9"])
    def test_analysis_entropy_grows_with_length(self, unit):
        results = [analyze(unit * k) for k in (3, 4, 5, 6)]
        entropies = [r.entropy_bits for r in results]
        assert entropies == sorted(entropies)
        assert len(set(entropies)) == len(entropies)


class TestCrackTime:
    """Tests for the shared crack-time policy."""

    def test_average_case_halving(self):
        assert expected_crack_seconds(10, 1.0) == pytest.approx(512.0)

    def test_zero_entropy(self):
        assert format_crack_time(expected_crack_seconds(0)) == "instant"

    def test_overflow_is_infinite(self):
        assert expected_crack_seconds(5000) == math.inf
        assert estimate_crack_time(5000) == "centuries"

    @pytest.mark.parametrize("seconds,text", [
        (0.5, "instant"),
        (59, "59 seconds"),
        (60, "1 minutes"),
        (7_200, "2 hours"),
        (86_400 * 3, "3 days"),
        (31_536_000 * 5, "5 years"),
        (31_536_000 * 1_000, "centuries"),
    ])
    def test_format(self, seconds, text):
        assert format_crack_time(seconds) == text
