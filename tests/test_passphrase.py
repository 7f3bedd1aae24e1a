"""
Tests for Passphrase and Personalization
========================================
Tests for passforge/generators/passphrase.py and personal.py.
"""

import math

import pytest

from passforge.core.charsets import CharsetRegistry, WordCorpus
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import PassphraseOptions, PersonalOptions
from passforge.generators import (
    apply_leetspeak,
    generate_passphrase,
    passphrase_crack_time,
    passphrase_entropy,
    personalize,
)

from conftest import SMALL_WORDS, ScriptedRandomSource


class TestPassphraseGenerator:
    """Tests for passphrase assembly."""

    def test_distinct_words(self, rng, small_registry):
        """Words are drawn without replacement."""
        options = PassphraseOptions(word_count=5, capitalize=False)
        for _ in range(10):
            words = generate_passphrase(options, registry=small_registry, rng=rng).split("-")
            assert len(words) == 5
            assert sorted(words) == sorted(SMALL_WORDS)

    def test_capitalization_and_separator(self, rng, small_registry):
        options = PassphraseOptions(word_count=3, separator="_", capitalize=True)
        phrase = generate_passphrase(options, registry=small_registry, rng=rng)
        words = phrase.split("_")
        assert len(words) == 3
        for word in words:
            assert word[0].isupper()
            assert word.lower() in SMALL_WORDS

    def test_appended_number(self, small_registry):
        """The number is separator-joined and between 10 and 99."""
        options = PassphraseOptions(word_count=2, capitalize=False, append_number=True)
        # distinct_sample picks indices 0 and 1, then number offset 32 -> 42
        rng = ScriptedRandomSource([0, 0, 32])
        phrase = generate_passphrase(options, registry=small_registry, rng=rng)
        assert phrase == "apple-breeze-42"

    @pytest.mark.parametrize("count", [1, 11])
    def test_word_count_out_of_range(self, rng, small_registry, count):
        with pytest.raises(InvalidConfiguration):
            generate_passphrase(
                PassphraseOptions(word_count=count), registry=small_registry, rng=rng
            )

    def test_word_count_exceeds_corpus(self, rng, small_registry):
        """Five words cannot yield six distinct draws."""
        with pytest.raises(InvalidConfiguration):
            generate_passphrase(
                PassphraseOptions(word_count=6), registry=small_registry, rng=rng
            )

    def test_bundled_corpus(self, rng):
        """Default registry produces a four-word phrase."""
        phrase = generate_passphrase(rng=rng)
        assert len(phrase.split("-")) == 4


class TestPassphraseEstimates:
    """Tests for passphrase entropy and crack-time helpers."""

    def test_entropy(self):
        corpus = WordCorpus(str(i) for i in range(1024))
        assert passphrase_entropy(4, corpus) == pytest.approx(40.0)

    def test_entropy_matches_log(self):
        corpus = WordCorpus(SMALL_WORDS)
        assert passphrase_entropy(3, corpus) == pytest.approx(3 * math.log2(5))

    def test_crack_time_shared_policy(self):
        """Forty bits at 1e9 guesses/s averages about nine minutes."""
        corpus = WordCorpus(str(i) for i in range(1024))
        assert passphrase_crack_time(4, corpus) == "9 minutes"

    def test_estimate_rejects_bad_count(self):
        with pytest.raises(InvalidConfiguration):
            passphrase_entropy(1, WordCorpus(SMALL_WORDS))


class TestPersonalize:
    """Tests for keyword personalization."""

    REGISTRY = CharsetRegistry()

    def test_reference_example(self):
        """Default pipeline without salt."""
        pw = personalize(["john", "london", "1990"], PersonalOptions(salt=False))
        assert pw == "J0hnL0nd0n1990"

    def test_leetspeak_map(self):
        assert apply_leetspeak("AEIOST xyz") == "@310$7 xyz"

    def test_separator_and_no_leet(self):
        options = PersonalOptions(leetspeak=False, separator=".", salt=False)
        assert personalize(["anna", "berlin"], options) == "Anna.Berlin"

    def test_capitalize_keeps_rest(self):
        """Only the first character changes case."""
        options = PersonalOptions(leetspeak=False, salt=False)
        assert personalize(["mcDonald"], options) == "McDonald"

    def test_salt_appended_once(self):
        """Salt is one symbol then a number from 10 to 99."""
        options = PersonalOptions(leetspeak=False, capitalize=False)
        # symbol index 0 -> "!", number offset 0 -> 10
        rng = ScriptedRandomSource([0, 0])
        pw = personalize(["cat", "dog"], options, registry=self.REGISTRY, rng=rng)
        assert pw == "catdog!10"

    def test_shuffle_is_permutation(self, rng):
        options = PersonalOptions(leetspeak=False, capitalize=False, shuffle=True,
                                  separator=" ", salt=False)
        pw = personalize(["one", "two", "three"], options, registry=self.REGISTRY, rng=rng)
        assert sorted(pw.split(" ")) == ["one", "three", "two"]

    @pytest.mark.parametrize("keywords", [[], None])
    def test_empty_keywords_fail(self, keywords):
        with pytest.raises(InvalidConfiguration):
            personalize(keywords)
