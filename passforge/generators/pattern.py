"""
Pattern Generator
==================

Template-driven generation. Each template character maps to a rule:

====  ============================
C     uppercase letter
c     lowercase letter
v     lowercase vowel
V     uppercase vowel
9     digit
!     symbol
any   copied literally
====  ============================

``"Cvccvc99!"`` yields strings such as ``"Rabmit42!"``.
"""

from __future__ import annotations

from typing import Callable, Optional

from passforge.core.charsets import CharsetRegistry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.random_source import RandomSource
from passforge.generators.base import resolve

_Rule = Callable[[CharsetRegistry, RandomSource], str]

PATTERN_RULES: dict[str, _Rule] = {
    "C": lambda reg, rng: rng.sample(reg.uppercase),
    "c": lambda reg, rng: rng.sample(reg.lowercase),
    "v": lambda reg, rng: rng.sample(reg.vowels),
    "V": lambda reg, rng: rng.sample(reg.vowels).upper(),
    "9": lambda reg, rng: rng.sample(reg.digits),
    "!": lambda reg, rng: rng.sample(reg.symbols),
}


def generate_from_pattern(
    pattern: Optional[str],
    *,
    registry: Optional[CharsetRegistry] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Expand *pattern* left to right; output length equals its length.

    Raises:
        InvalidConfiguration: If the pattern is empty or ``None``.
    """
    if not pattern:
        raise InvalidConfiguration("pattern cannot be empty")
    registry, rng = resolve(registry, rng)

    out: list[str] = []
    for char in pattern:
        rule = PATTERN_RULES.get(char)
        out.append(rule(registry, rng) if rule is not None else char)
    return "".join(out)
