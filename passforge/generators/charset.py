"""
Charset and Keyword Generators
===============================

Three strategies built on the enabled character classes and the caller's
keywords:

- **random**: every position is an independent draw from the enabled
  class union.
- **keyword-mixed**: random filler with exactly one keyword written
  verbatim at a random offset.
- **keyword-only**: keywords tiled end to end, the last one truncated
  from its start so the output length is exact.
"""

from __future__ import annotations

from typing import Optional

from passforge.core.charsets import CharsetRegistry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import GenerationOptions
from passforge.core.random_source import RandomSource
from passforge.generators.base import require_length, resolve


def _pool(options: GenerationOptions, registry: CharsetRegistry) -> str:
    return registry.pool(
        upper=options.use_upper,
        lower=options.use_lower,
        digits=options.use_digits,
        symbols=options.use_symbols,
    )


def _sample_run(pool: str, length: int, rng: RandomSource) -> list[str]:
    return [rng.sample(pool) for _ in range(length)]


def generate_random(
    options: GenerationOptions,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Sample ``options.length`` characters from the enabled classes.

    Raises:
        InvalidConfiguration: If no class is enabled or length < 1.
    """
    registry, rng = resolve(registry, rng)
    require_length(options.length, 1, "random")
    pool = _pool(options, registry)
    if not pool:
        raise InvalidConfiguration("at least one character set must be enabled")
    return "".join(_sample_run(pool, options.length, rng))


def generate_keyword_mixed(
    options: GenerationOptions,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Embed one randomly chosen keyword into random filler.

    Every keyword must fit in the requested length; the check is made
    up front so the outcome does not depend on which keyword is drawn.

    Raises:
        InvalidConfiguration: No keywords, no character class for the
            filler, or a keyword longer than the requested length.
    """
    registry, rng = resolve(registry, rng)
    length = options.length
    require_length(length, 1, "keyword-mixed")
    if not options.keywords:
        raise InvalidConfiguration("keyword-mixed generation needs keywords")

    too_long = [k for k in options.keywords if len(k) > length]
    if too_long:
        raise InvalidConfiguration(
            f"keyword {too_long[0]!r} is longer than the requested length {length}"
        )

    pool = _pool(options, registry)
    if not pool:
        raise InvalidConfiguration(
            "keyword-mixed generation needs a character set for the filler"
        )

    chars = _sample_run(pool, length, rng)
    keyword = rng.sample(options.keywords)
    offset = rng.uniform_int(length - len(keyword) + 1)
    chars[offset:offset + len(keyword)] = list(keyword)
    return "".join(chars)


def generate_keyword_only(
    options: GenerationOptions,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Tile whole keywords until the requested length is met exactly.

    While some keyword fits the remaining space, a fitting keyword is
    chosen uniformly and appended whole. Once none fits, a random keyword
    is cut down to the remainder.

    Raises:
        InvalidConfiguration: No keywords or length < 1.
    """
    _, rng = resolve(registry, rng)
    length = options.length
    require_length(length, 1, "keyword-only")
    keywords = options.keywords
    if not keywords:
        raise InvalidConfiguration("keyword-only generation needs keywords")

    parts: list[str] = []
    remaining = length
    while remaining > 0:
        fitting = [k for k in keywords if len(k) <= remaining]
        if fitting:
            piece = rng.sample(fitting)
        else:
            piece = rng.sample(keywords)[:remaining]
        parts.append(piece)
        remaining -= len(piece)
    return "".join(parts)
