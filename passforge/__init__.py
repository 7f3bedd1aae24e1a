"""
PassForge -- Password Generation and Strength Analysis
=======================================================

Generates passwords from character classes, keywords, templates,
pronounceable syllables and word lists, and rates passwords by
brute-force entropy, expected crack time and a heuristic score.
An optional k-anonymity breach lookup reports whether a password
appears in a public breach corpus.

Modules:
    - passforge.core.engine: Configured facade over every operation
    - passforge.core.models: Pydantic data models
    - passforge.generators: Generation strategies and batch generation
    - passforge.analyzers: Strength analysis and crack-time estimation
    - passforge.collectors: Breach lookup client
    - passforge.output: Console and export output
    - passforge.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - EFF Dice-Generated Passphrases (2016).
"""

__version__ = "1.0.0"
__tool_name__ = "passforge"

from passforge.analyzers.strength import analyze
from passforge.generators import (
    generate,
    generate_from_pattern,
    generate_passphrase,
    personalize,
)

__all__ = [
    "analyze",
    "generate",
    "generate_from_pattern",
    "generate_passphrase",
    "personalize",
]
