"""
PassForge Collectors
=====================

Adapters for remote data sources. Currently the k-anonymity breach lookup.
"""

from passforge.collectors.breach import (
    BreachChecker,
    BreachLookup,
    PwnedRangeClient,
    parse_range_response,
    sha1_split,
)

__all__ = [
    "BreachChecker",
    "BreachLookup",
    "PwnedRangeClient",
    "parse_range_response",
    "sha1_split",
]
