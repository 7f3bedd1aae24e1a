"""Helpers shared by every generator."""

from __future__ import annotations

from typing import Optional

from passforge.core.charsets import CharsetRegistry, default_registry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.random_source import RandomSource, default_source


def resolve(
    registry: Optional[CharsetRegistry],
    rng: Optional[RandomSource],
) -> tuple[CharsetRegistry, RandomSource]:
    """Fill in the process-wide registry and CSPRNG when not injected."""
    return registry or default_registry(), rng or default_source()


def require_length(length: int, minimum: int, strategy: str) -> None:
    if length < minimum:
        raise InvalidConfiguration(
            f"{strategy} passwords need a length of at least {minimum} (got {length})"
        )
