"""
Batch Generation
=================

Generate up to :data:`MAX_BATCH` passwords of one kind in a single call.
Export of the resulting :class:`BatchResult` lives in
:mod:`passforge.output.report`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import ValidationError

from passforge.core.charsets import CharsetRegistry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import (
    BatchResult,
    GenerationOptions,
    PassphraseOptions,
    Strategy,
)
from passforge.core.random_source import RandomSource
from passforge.generators.base import resolve
from passforge.generators.dispatch import generate
from passforge.generators.passphrase import generate_passphrase
from passforge.generators.pattern import generate_from_pattern
from passforge.generators.pronounceable import generate_pronounceable

MAX_BATCH = 1000
DEFAULT_PATTERN = "Cvccvc99!"

BATCH_KINDS: tuple[Strategy, ...] = (
    Strategy.RANDOM,
    Strategy.PASSPHRASE,
    Strategy.PRONOUNCEABLE,
    Strategy.PATTERN,
)


def generate_batch(
    count: int,
    kind: Strategy | str = Strategy.RANDOM,
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
    limit: int = MAX_BATCH,
    **options: Any,
) -> BatchResult:
    """Generate *count* passwords of *kind*.

    Extra keyword arguments are forwarded to the option model of the kind
    (``GenerationOptions`` for random and pronounceable, ``PassphraseOptions``
    for passphrase); ``pattern`` selects the template for the pattern kind.

    Raises:
        InvalidConfiguration: Count outside 1..limit, unknown kind, or
            options the kind rejects.
    """
    if count < 1:
        raise InvalidConfiguration("count must be at least 1")
    if count > limit:
        raise InvalidConfiguration(f"count must be at most {limit}")

    try:
        kind = Strategy(kind)
    except ValueError:
        raise InvalidConfiguration(f"unknown batch kind: {kind!r}") from None
    if kind not in BATCH_KINDS:
        raise InvalidConfiguration(f"unknown batch kind: {kind.value!r}")

    registry, rng = resolve(registry, rng)
    make = _factory(kind, options, registry, rng)
    return BatchResult(kind=kind, passwords=tuple(make() for _ in range(count)))


def _factory(
    kind: Strategy,
    options: dict[str, Any],
    registry: CharsetRegistry,
    rng: RandomSource,
) -> Callable[[], str]:
    try:
        if kind is Strategy.PASSPHRASE:
            phrase_opts = PassphraseOptions(**options)
            return lambda: generate_passphrase(phrase_opts, registry=registry, rng=rng)
        if kind is Strategy.PATTERN:
            template = options.get("pattern") or DEFAULT_PATTERN
            return lambda: generate_from_pattern(template, registry=registry, rng=rng)
        gen_opts = GenerationOptions(**options)
    except ValidationError as exc:
        raise InvalidConfiguration(f"invalid {kind.value} options: {exc}") from exc

    if kind is Strategy.PRONOUNCEABLE:
        return lambda: generate_pronounceable(gen_opts, registry=registry, rng=rng)
    return lambda: generate(gen_opts, registry=registry, rng=rng)
