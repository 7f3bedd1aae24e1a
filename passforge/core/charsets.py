"""
Charset Registry
=================

Immutable character classes and the passphrase word corpus.

A :class:`CharsetRegistry` is built once and passed by reference into every
generator; nothing in the package mutates it. Tests construct their own
registries (for example with a five-word corpus) instead of patching
module globals.

The bundled corpus is the leading portion of the EFF long word list.

References:
    - EFF (2016). Deep Dive: EFF's New Wordlists for Random Passphrases.
      https://www.eff.org/deeplinks/2016/07/new-wordlists-random-passphrases
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from typing import Iterable

from passforge.core.random_source import RandomSource, distinct_sample

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
SYMBOLS: str = "!@#$%^&*-_=+"
VOWELS: str = "aeiou"
CONSONANTS: str = "bcdfghjklmnprstvwxz"


class WordCorpus:
    """Read-only, de-duplicated sequence of passphrase words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]) -> None:
        seen: dict[str, None] = {}
        for word in words:
            word = word.strip()
            if word:
                seen.setdefault(word, None)
        self._words: tuple[str, ...] = tuple(seen)

    @classmethod
    def from_package(cls) -> WordCorpus:
        """Load the word list shipped in ``passforge/data/wordlist.txt``."""
        text = (
            resources.files("passforge")
            .joinpath("data/wordlist.txt")
            .read_text(encoding="utf-8")
        )
        return cls(text.splitlines())

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self):
        return iter(self._words)

    @property
    def bits_per_word(self) -> float:
        """Entropy contributed by one uniformly drawn word."""
        return math.log2(len(self._words)) if self._words else 0.0

    def random_word(self, rng: RandomSource) -> str:
        return rng.sample(self._words)

    def random_distinct_words(self, k: int, rng: RandomSource) -> list[str]:
        """Draw *k* distinct words uniformly without replacement.

        Raises:
            ValueError: If *k* exceeds the corpus size.
        """
        return distinct_sample(rng, self._words, k)


@dataclass(frozen=True, slots=True)
class CharsetRegistry:
    """Immutable bundle of character classes plus the word corpus."""

    uppercase: str = UPPERCASE
    lowercase: str = LOWERCASE
    digits: str = DIGITS
    symbols: str = SYMBOLS
    vowels: str = VOWELS
    consonants: str = CONSONANTS
    corpus: WordCorpus = field(default_factory=lambda: WordCorpus(()), compare=False)

    def __post_init__(self) -> None:
        for name in ("uppercase", "lowercase", "digits", "symbols", "vowels", "consonants"):
            if not getattr(self, name):
                raise ValueError(f"character class {name!r} must not be empty")

    def pool(
        self,
        *,
        upper: bool,
        lower: bool,
        digits: bool,
        symbols: bool,
    ) -> str:
        """Concatenate the enabled classes into one sampling pool.

        Characters shared between classes are not de-duplicated, so each
        class keeps a weight proportional to its own size.
        """
        parts: list[str] = []
        if upper:
            parts.append(self.uppercase)
        if lower:
            parts.append(self.lowercase)
        if digits:
            parts.append(self.digits)
        if symbols:
            parts.append(self.symbols)
        return "".join(parts)


@lru_cache(maxsize=1)
def default_registry() -> CharsetRegistry:
    """Process-wide registry carrying the bundled word corpus."""
    return CharsetRegistry(corpus=WordCorpus.from_package())
