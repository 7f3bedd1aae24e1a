"""
Password Strength Analyzer
===========================

Brute-force oriented password assessment:

1. Charset size inferred from which character categories appear
   (lowercase +26, uppercase +26, digits +10, anything else +32).
2. Combinatorial entropy ``length * log2(charset_size)``.
3. Expected crack time at a fixed guess rate (average case).
4. Common-password denylist check, which forces ``very_weak``.
5. Piecewise entropy-to-strength mapping.
6. Heuristic 0-100 score with length / composition adjustments.
7. Ordered improvement suggestions.

The charset size is a coarse upper bound: a password containing one digit
is scored as if every digit were possible at every position.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from passforge.analyzers.crack_time import DEFAULT_GUESSES_PER_SECOND, estimate_crack_time
from passforge.core.exceptions import EmptyInput
from passforge.core.models import AnalysisResult, Strength


# ===================================================================== #
#  Denylist and category patterns
# ===================================================================== #

COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "123456", "12345678", "qwerty", "abc123", "monkey",
    "1234567", "letmein", "trustno1", "dragon", "baseball", "iloveyou",
    "master", "sunshine", "ashley", "bailey", "passw0rd", "shadow",
    "123123", "654321", "superman", "qazwsx", "michael", "football",
})

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_OTHER = re.compile(r"[^a-zA-Z0-9]")

_ALL_LOWER = re.compile(r"[a-z]+")
_ALL_UPPER = re.compile(r"[A-Z]+")
_ALL_DIGITS = re.compile(r"[0-9]+")

# Lower bounds (bits) of each band, strongest first
_STRENGTH_BANDS: tuple[tuple[float, Strength], ...] = (
    (128.0, Strength.VERY_STRONG),
    (60.0, Strength.STRONG),
    (36.0, Strength.FAIR),
    (28.0, Strength.WEAK),
)

SUGGEST_LENGTH = "Use at least 12 characters"
SUGGEST_UPPER = "Add uppercase letters"
SUGGEST_LOWER = "Add lowercase letters"
SUGGEST_DIGITS = "Add numbers"
SUGGEST_SYMBOLS = "Add symbols (!@#$%^&*)"
SUGGEST_AVOID_COMMON = "Avoid common passwords"
SUGGEST_PASSPHRASE = "Consider using a passphrase"


class StrengthAnalyzer:
    """Scores passwords for guessability.

    Usage::

        analyzer = StrengthAnalyzer()
        result = analyzer.analyze("MyP@ssw0rd")
        print(result.strength.value, f"{result.entropy_bits:.1f} bits")

    Args:
        guesses_per_second: Attack speed used for crack-time estimates.
    """

    def __init__(self, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> None:
        if guesses_per_second <= 0:
            raise ValueError("guesses_per_second must be positive")
        self.guesses_per_second = guesses_per_second

    def analyze(self, password: Optional[str]) -> AnalysisResult:
        """Assess *password*.

        Raises:
            EmptyInput: If *password* is empty or ``None``.
        """
        if not password:
            raise EmptyInput("password cannot be empty")

        entropy = self.entropy(password)
        common = self.is_common(password)

        return AnalysisResult(
            password=password,
            score=self._score(password, entropy, common),
            entropy_bits=entropy,
            crack_time=estimate_crack_time(entropy, self.guesses_per_second),
            strength=self._rate(entropy, common),
            suggestions=tuple(self._suggestions(password, entropy, common)),
        )

    # ------------------------------------------------------------------ #
    #  Entropy
    # ------------------------------------------------------------------ #

    @staticmethod
    def charset_size(password: str) -> int:
        """Sum the sizes of the character categories present."""
        size = 0
        if _LOWER.search(password):
            size += 26
        if _UPPER.search(password):
            size += 26
        if _DIGIT.search(password):
            size += 10
        if _OTHER.search(password):
            size += 32
        return size

    @classmethod
    def entropy(cls, password: str) -> float:
        """Combinatorial entropy: ``len(password) * log2(charset_size)``."""
        size = cls.charset_size(password)
        if size <= 0:
            return 0.0
        return len(password) * math.log2(size)

    @staticmethod
    def is_common(password: str) -> bool:
        return password.lower() in COMMON_PASSWORDS

    # ------------------------------------------------------------------ #
    #  Rating and scoring
    # ------------------------------------------------------------------ #

    @staticmethod
    def _rate(entropy: float, common: bool) -> Strength:
        if common:
            return Strength.VERY_WEAK
        for floor, strength in _STRENGTH_BANDS:
            if entropy >= floor:
                return strength
        return Strength.VERY_WEAK

    @staticmethod
    def _score(password: str, entropy: float, common: bool) -> int:
        """Heuristic score.

        Scoring breakdown:
        - Base: ``min(entropy * 1.5, 100)``
        - Length < 8: -10
        - Denylisted: -15
        - All lowercase / all uppercase / all digits: -5 each
        - Length > 12: +5, length > 16: +5 more
        - All four categories present: +10
        """
        score = min(entropy * 1.5, 100.0)
        length = len(password)

        if length < 8:
            score -= 10
        if common:
            score -= 15
        for whole in (_ALL_LOWER, _ALL_UPPER, _ALL_DIGITS):
            if whole.fullmatch(password):
                score -= 5

        if length > 12:
            score += 5
        if length > 16:
            score += 5
        if all(p.search(password) for p in (_LOWER, _UPPER, _DIGIT, _OTHER)):
            score += 10

        return int(max(0.0, min(100.0, score)))

    @staticmethod
    def _suggestions(password: str, entropy: float, common: bool) -> list[str]:
        suggestions: list[str] = []
        if len(password) < 12:
            suggestions.append(SUGGEST_LENGTH)
        if not _UPPER.search(password):
            suggestions.append(SUGGEST_UPPER)
        if not _LOWER.search(password):
            suggestions.append(SUGGEST_LOWER)
        if not _DIGIT.search(password):
            suggestions.append(SUGGEST_DIGITS)
        if not _OTHER.search(password):
            suggestions.append(SUGGEST_SYMBOLS)
        if common:
            suggestions.append(SUGGEST_AVOID_COMMON)
        if entropy < 50:
            suggestions.append(SUGGEST_PASSPHRASE)
        return suggestions


_DEFAULT_ANALYZER = StrengthAnalyzer()


def analyze(password: Optional[str]) -> AnalysisResult:
    """Analyse *password* at the default guess rate of 10^9 per second."""
    return _DEFAULT_ANALYZER.analyze(password)
