"""
Passphrase Generator
=====================

XKCD-style passphrases: distinct words drawn uniformly from the corpus,
optionally capitalised, joined by a separator and optionally followed by
a two-digit number.

    >>> generate_passphrase(PassphraseOptions(word_count=4))   # doctest: +SKIP
    'Acrobat-Bulky-Almanac-Brunch'
"""

from __future__ import annotations

from typing import Optional

from passforge.analyzers.crack_time import DEFAULT_GUESSES_PER_SECOND, estimate_crack_time
from passforge.core.charsets import CharsetRegistry, WordCorpus
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import PassphraseOptions
from passforge.core.random_source import RandomSource, randint
from passforge.generators.base import resolve

MIN_WORDS = 2
MAX_WORDS = 10


def _check_word_count(word_count: int) -> None:
    if word_count < MIN_WORDS:
        raise InvalidConfiguration(f"word count must be at least {MIN_WORDS}")
    if word_count > MAX_WORDS:
        raise InvalidConfiguration(f"word count must be at most {MAX_WORDS}")


def generate_passphrase(
    options: Optional[PassphraseOptions] = None,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Assemble a passphrase from ``options.word_count`` distinct words.

    Raises:
        InvalidConfiguration: Word count outside 2..10 or larger than the
            corpus.
    """
    options = options or PassphraseOptions()
    _check_word_count(options.word_count)
    registry, rng = resolve(registry, rng)

    corpus = registry.corpus
    if options.word_count > len(corpus):
        raise InvalidConfiguration(
            f"corpus holds {len(corpus)} words, cannot draw {options.word_count}"
        )

    words = corpus.random_distinct_words(options.word_count, rng)
    if options.capitalize:
        words = [w[:1].upper() + w[1:] for w in words]

    phrase = options.separator.join(words)
    if options.append_number:
        phrase += f"{options.separator}{randint(rng, 10, 99)}"
    return phrase


def passphrase_entropy(word_count: int, corpus: WordCorpus) -> float:
    """Entropy in bits of ``word_count`` words drawn from *corpus*.

    Computed as ``word_count * log2(len(corpus))``, ignoring the small
    loss from drawing without replacement.
    """
    _check_word_count(word_count)
    return corpus.bits_per_word * word_count


def passphrase_crack_time(
    word_count: int,
    corpus: WordCorpus,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
) -> str:
    """Expected crack time for a passphrase, using the analyzer's policy."""
    return estimate_crack_time(passphrase_entropy(word_count, corpus), guesses_per_second)
