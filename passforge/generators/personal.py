"""
Personalization Transform
==========================

Turns memorable keywords (a name, a city, a year) into a password:

1. optional shuffle of the keyword order
2. uppercase the first character of each keyword
3. leetspeak substitution
4. join with a separator
5. optional salt: one symbol and a number from 10 to 99, appended once

    >>> personalize(["john", "london", "1990"], PersonalOptions(salt=False))
    'J0hnL0nd0n1990'
"""

from __future__ import annotations

from typing import Optional, Sequence

from passforge.core.charsets import CharsetRegistry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import PersonalOptions
from passforge.core.random_source import RandomSource, randint, shuffled
from passforge.generators.base import resolve

LEET_MAP: dict[str, str] = {
    "a": "@",
    "e": "3",
    "i": "1",
    "o": "0",
    "s": "$",
    "t": "7",
}


def apply_leetspeak(word: str) -> str:
    """Substitute mapped letters regardless of case; others pass through."""
    return "".join(LEET_MAP.get(c.lower(), c) for c in word)


def personalize(
    keywords: Optional[Sequence[str]],
    options: Optional[PersonalOptions] = None,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Build a password from *keywords*.

    Raises:
        InvalidConfiguration: If *keywords* is empty or ``None``.
    """
    if not keywords:
        raise InvalidConfiguration("keywords cannot be empty")
    options = options or PersonalOptions()
    registry, rng = resolve(registry, rng)

    words = list(keywords)
    if options.shuffle:
        words = shuffled(rng, words)

    processed: list[str] = []
    for word in words:
        if options.capitalize:
            word = word[:1].upper() + word[1:]
        if options.leetspeak:
            word = apply_leetspeak(word)
        processed.append(word)

    password = options.separator.join(processed)
    if options.salt:
        password += rng.sample(registry.symbols) + str(randint(rng, 10, 99))
    return password
