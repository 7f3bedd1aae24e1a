"""
Tests for Charset Registry
==========================
Tests for passforge/core/charsets.py.
"""

import dataclasses

import pytest

from passforge.core.charsets import (
    CONSONANTS,
    SYMBOLS,
    VOWELS,
    CharsetRegistry,
    WordCorpus,
    default_registry,
)


class TestCharsetRegistry:
    """Tests for CharsetRegistry."""

    def test_default_classes(self):
        """Default classes match the documented alphabets."""
        reg = CharsetRegistry()
        assert len(reg.uppercase) == 26
        assert len(reg.lowercase) == 26
        assert reg.digits == "0123456789"
        assert reg.symbols == SYMBOLS == "!@#$%^&*-_=+"
        assert reg.vowels == VOWELS == "aeiou"
        assert reg.consonants == CONSONANTS

    def test_consonants_and_vowels_disjoint(self):
        assert not set(CONSONANTS) & set(VOWELS)

    def test_is_immutable(self):
        """Registries cannot be mutated after construction."""
        reg = CharsetRegistry()
        with pytest.raises(dataclasses.FrozenInstanceError):
            reg.symbols = "!"

    def test_empty_class_rejected(self):
        with pytest.raises(ValueError):
            CharsetRegistry(digits="")

    def test_pool_concatenates_enabled_classes(self):
        """Pool joins enabled classes in a fixed order."""
        reg = CharsetRegistry()
        pool = reg.pool(upper=False, lower=False, digits=True, symbols=True)
        assert pool == reg.digits + reg.symbols

    def test_pool_empty_when_nothing_enabled(self):
        reg = CharsetRegistry()
        assert reg.pool(upper=False, lower=False, digits=False, symbols=False) == ""


class TestWordCorpus:
    """Tests for WordCorpus."""

    def test_deduplicates_and_strips(self):
        corpus = WordCorpus(["alpha", " beta ", "alpha", "", "gamma"])
        assert corpus.words == ("alpha", "beta", "gamma")
        assert len(corpus) == 3
        assert "beta" in corpus

    def test_bits_per_word(self):
        corpus = WordCorpus(["a", "b", "c", "d"])
        assert corpus.bits_per_word == pytest.approx(2.0)

    def test_random_distinct_words(self, rng):
        corpus = WordCorpus(["a", "b", "c", "d", "e"])
        words = corpus.random_distinct_words(5, rng)
        assert sorted(words) == ["a", "b", "c", "d", "e"]

    def test_bundled_word_list(self):
        """The packaged word list loads and is de-duplicated."""
        corpus = WordCorpus.from_package()
        assert len(corpus) > 1000
        assert len(set(corpus)) == len(corpus)
        assert all(word == word.strip() and word for word in corpus)

    def test_default_registry_cached(self):
        """default_registry() returns one shared instance."""
        assert default_registry() is default_registry()
        assert len(default_registry().corpus) > 1000
