"""
PassForge Generators
=====================

Password construction strategies. Every generator is a plain function of
its options plus an injectable :class:`~passforge.core.charsets.CharsetRegistry`
and :class:`~passforge.core.random_source.RandomSource`.
"""

from passforge.generators.batch import generate_batch
from passforge.generators.charset import (
    generate_keyword_mixed,
    generate_keyword_only,
    generate_random,
)
from passforge.generators.dispatch import generate, select_strategy
from passforge.generators.passphrase import (
    generate_passphrase,
    passphrase_crack_time,
    passphrase_entropy,
)
from passforge.generators.pattern import generate_from_pattern
from passforge.generators.personal import apply_leetspeak, personalize
from passforge.generators.pronounceable import generate_pronounceable

__all__ = [
    "apply_leetspeak",
    "generate",
    "generate_batch",
    "generate_from_pattern",
    "generate_keyword_mixed",
    "generate_keyword_only",
    "generate_passphrase",
    "generate_pronounceable",
    "generate_random",
    "passphrase_crack_time",
    "passphrase_entropy",
    "personalize",
    "select_strategy",
]
