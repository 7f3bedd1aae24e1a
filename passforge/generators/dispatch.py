"""
Strategy Dispatch
==================

Single entry point :func:`generate` that maps a :class:`GenerationOptions`
onto one strategy. An explicit ``options.strategy`` wins; otherwise the
configuration shape decides, in priority order:

1. keywords and ``mix``      -> keyword-mixed
2. keywords without ``mix``  -> keyword-only
3. no keywords               -> random
"""

from __future__ import annotations

from typing import Callable, Optional

from passforge.core.charsets import CharsetRegistry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import GenerationOptions, PassphraseOptions, Strategy
from passforge.core.random_source import RandomSource
from passforge.generators.charset import (
    generate_keyword_mixed,
    generate_keyword_only,
    generate_random,
)
from passforge.generators.passphrase import generate_passphrase
from passforge.generators.pattern import generate_from_pattern
from passforge.generators.pronounceable import generate_pronounceable


def select_strategy(options: GenerationOptions) -> Strategy:
    """Pick the strategy implied by *options*."""
    if options.strategy is not None:
        return options.strategy
    if options.keywords:
        return Strategy.KEYWORD_MIXED if options.mix else Strategy.KEYWORD_ONLY
    return Strategy.RANDOM


def _pattern(options, *, registry, rng) -> str:
    return generate_from_pattern(options.pattern, registry=registry, rng=rng)


_PASSPHRASE_FIELDS = frozenset({"strategy", "capitalize"})


def _passphrase(options, *, registry, rng) -> str:
    """Default-sized passphrase; only ``capitalize`` carries over.

    Word count, separator and number come from :class:`PassphraseOptions`,
    so any other field set on *options* is rejected rather than ignored.
    """
    unused = sorted(options.model_fields_set - _PASSPHRASE_FIELDS)
    if unused:
        raise InvalidConfiguration(
            f"passphrase strategy does not use {', '.join(unused)}; "
            "pass PassphraseOptions to generate_passphrase instead"
        )
    return generate_passphrase(
        PassphraseOptions(capitalize=options.capitalize), registry=registry, rng=rng
    )


_STRATEGIES: dict[Strategy, Callable[..., str]] = {
    Strategy.KEYWORD_MIXED: generate_keyword_mixed,
    Strategy.KEYWORD_ONLY: generate_keyword_only,
    Strategy.RANDOM: generate_random,
    Strategy.PATTERN: _pattern,
    Strategy.PRONOUNCEABLE: generate_pronounceable,
    Strategy.PASSPHRASE: _passphrase,
}


def generate(
    options: Optional[GenerationOptions] = None,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Generate one password according to *options*.

    Raises:
        InvalidConfiguration: If no character class is enabled and no
            keywords were given, or the chosen strategy rejects the options.
    """
    options = options or GenerationOptions()
    strategy = select_strategy(options)
    if (
        strategy in (Strategy.RANDOM, Strategy.KEYWORD_MIXED, Strategy.KEYWORD_ONLY)
        and not options.has_charset
        and not options.keywords
    ):
        raise InvalidConfiguration(
            "at least one character set must be enabled or keywords supplied"
        )
    return _STRATEGIES[strategy](options, registry=registry, rng=rng)
