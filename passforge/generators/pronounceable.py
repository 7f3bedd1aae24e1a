"""
Pronounceable Generator
========================

Builds passwords that are easier to say and type by alternating
consonants and vowels, then appending optional digit and symbol suffixes.
The alternation parity is drawn once per password.
"""

from __future__ import annotations

from typing import Optional

from passforge.core.charsets import CharsetRegistry
from passforge.core.models import GenerationOptions
from passforge.core.random_source import RandomSource
from passforge.generators.base import require_length, resolve

MIN_LENGTH = 4
DIGIT_SUFFIX = 2
SYMBOL_SUFFIX = 1


def _alternating_letters(
    count: int, registry: CharsetRegistry, rng: RandomSource
) -> list[str]:
    use_consonant = rng.uniform_int(2) == 0
    letters: list[str] = []
    for _ in range(count):
        pool = registry.consonants if use_consonant else registry.vowels
        letters.append(rng.sample(pool))
        use_consonant = not use_consonant
    return letters


def generate_pronounceable(
    options: Optional[GenerationOptions] = None,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Generate a pronounceable password of exactly ``options.length``.

    Uses ``use_digits`` (two trailing digits), ``use_symbols`` (one
    trailing symbol) and ``capitalize`` (uppercase first letter).

    Raises:
        InvalidConfiguration: If length < 4.
    """
    options = options or GenerationOptions()
    registry, rng = resolve(registry, rng)
    require_length(options.length, MIN_LENGTH, "pronounceable")

    letter_count = options.length
    if options.use_digits:
        letter_count -= DIGIT_SUFFIX
    if options.use_symbols:
        letter_count -= SYMBOL_SUFFIX

    chars = _alternating_letters(letter_count, registry, rng)
    if options.capitalize:
        chars[0] = chars[0].upper()
    if options.use_digits:
        chars.extend(rng.sample(registry.digits) for _ in range(DIGIT_SUFFIX))
    if options.use_symbols:
        chars.append(rng.sample(registry.symbols))
    return "".join(chars)
