"""
PassForge Analyzers
====================

Strength analysis and crack-time estimation.
"""

from passforge.analyzers.crack_time import (
    estimate_crack_time,
    expected_crack_seconds,
    format_crack_time,
)
from passforge.analyzers.strength import StrengthAnalyzer, analyze

__all__ = [
    "StrengthAnalyzer",
    "analyze",
    "estimate_crack_time",
    "expected_crack_seconds",
    "format_crack_time",
]
