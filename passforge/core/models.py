"""
PassForge Core Data Models
===========================

Pydantic models for generation options, analysis results, breach lookups
and batch output. Option models only coerce types; range and consistency
checks live in the generators, which raise
:class:`~passforge.core.exceptions.InvalidConfiguration` so callers see a
single error type for every unusable configuration.

All result models are frozen and serialisable to JSON.
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Strategy(str, enum.Enum):
    """Closed set of generation strategies."""

    KEYWORD_MIXED = "keyword_mixed"
    KEYWORD_ONLY = "keyword_only"
    RANDOM = "random"
    PATTERN = "pattern"
    PRONOUNCEABLE = "pronounceable"
    PASSPHRASE = "passphrase"


class Strength(str, enum.Enum):
    """Qualitative password strength rating, weakest first."""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


class BreachStatus(str, enum.Enum):
    """Outcome of a k-anonymity breach lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"


# ===================================================================== #
#  Option Models
# ===================================================================== #


class GenerationOptions(BaseModel):
    """Options for charset, keyword and pronounceable generation.

    Attributes:
        length: Requested output length.
        use_upper: Include uppercase letters.
        use_lower: Include lowercase letters.
        use_digits: Include digits (pronounceable: append two digits).
        use_symbols: Include symbols (pronounceable: append one symbol).
        keywords: Ordered keywords; a comma-delimited string is split.
        mix: Blend one keyword into random filler instead of tiling.
        capitalize: Uppercase the first letter of pronounceable output.
        strategy: Explicit strategy; inferred from the options when ``None``.
        pattern: Template used by the pattern strategy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = 12
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_symbols: bool = False
    keywords: tuple[str, ...] = ()
    mix: bool = True
    capitalize: bool = True
    strategy: Optional[Strategy] = None
    pattern: Optional[str] = None

    @field_validator("keywords", mode="before")
    @classmethod
    def _split_keywords(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        return tuple(k.strip() for k in v if isinstance(k, str) and k.strip())

    @property
    def has_charset(self) -> bool:
        return self.use_upper or self.use_lower or self.use_digits or self.use_symbols


class PassphraseOptions(BaseModel):
    """Options for passphrase assembly (word count must be 2..10)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    word_count: int = 4
    separator: str = "-"
    capitalize: bool = True
    append_number: bool = False


class PersonalOptions(BaseModel):
    """Options for keyword personalization."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    leetspeak: bool = True
    capitalize: bool = True
    shuffle: bool = False
    separator: str = ""
    salt: bool = True


# ===================================================================== #
#  Result Models
# ===================================================================== #


class AnalysisResult(BaseModel):
    """Immutable strength assessment of one password.

    Attributes:
        password: The analysed password, unchanged.
        score: Heuristic score in [0, 100].
        entropy_bits: Brute-force entropy estimate in bits.
        crack_time: Human-readable expected crack time.
        strength: Qualitative rating.
        suggestions: Ordered improvement suggestions.
    """

    model_config = ConfigDict(frozen=True)

    password: str
    score: int = Field(ge=0, le=100)
    entropy_bits: float = Field(ge=0.0)
    crack_time: str
    strength: Strength
    suggestions: tuple[str, ...] = ()

    def to_summary(self) -> dict[str, Any]:
        """Display mapping without the plaintext password."""
        return {
            "score": self.score,
            "entropy": round(self.entropy_bits, 2),
            "crack_time": self.crack_time,
            "strength": self.strength.value,
            "suggestions": list(self.suggestions),
        }


class BreachResult(BaseModel):
    """Result of a breach lookup.

    ``UNREACHABLE`` means the answer is unknown, which is different from
    a confirmed ``NOT_FOUND``.
    """

    model_config = ConfigDict(frozen=True)

    status: BreachStatus
    count: int = Field(default=0, ge=0)
    error: Optional[str] = None

    @property
    def breached(self) -> Optional[bool]:
        if self.status is BreachStatus.UNREACHABLE:
            return None
        return self.status is BreachStatus.FOUND


class BatchResult(BaseModel):
    """A batch of generated passwords of one kind."""

    model_config = ConfigDict(frozen=True)

    kind: Strategy
    passwords: tuple[str, ...]
    generated_at: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )

    @property
    def count(self) -> int:
        return len(self.passwords)
