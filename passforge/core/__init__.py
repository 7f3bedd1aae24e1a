"""
PassForge Core Module
======================

Shared data models, exceptions, character classes and the random source.
The orchestrating :class:`~passforge.core.engine.ForgeEngine` lives in
:mod:`passforge.core.engine`.
"""

from passforge.core.exceptions import (
    BreachLookupUnavailable,
    EmptyInput,
    ForgeError,
    InvalidConfiguration,
)
from passforge.core.models import (
    AnalysisResult,
    BatchResult,
    BreachResult,
    BreachStatus,
    GenerationOptions,
    PassphraseOptions,
    PersonalOptions,
    Strategy,
    Strength,
)

__all__ = [
    "AnalysisResult",
    "BatchResult",
    "BreachLookupUnavailable",
    "BreachResult",
    "BreachStatus",
    "EmptyInput",
    "ForgeError",
    "GenerationOptions",
    "InvalidConfiguration",
    "PassphraseOptions",
    "PersonalOptions",
    "Strategy",
    "Strength",
]
