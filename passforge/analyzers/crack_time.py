"""
Crack Time Estimation
======================

One formatting policy used by both the strength analyzer and passphrase
estimates. A brute-force attacker is expected to succeed after searching
half of the keyspace, so the expected time is::

    seconds = 2 ** entropy / guesses_per_second / 2

Durations are reported in the coarsest unit where the value is still at
least one, truncated to an integer. Anything beyond a thousand years is
reported as ``"centuries"``.
"""

from __future__ import annotations

import math

DEFAULT_GUESSES_PER_SECOND: float = 1e9

_MINUTE = 60
_HOUR = 3_600
_DAY = 86_400
_YEAR = 31_536_000
_MILLENNIUM = _YEAR * 1_000

# 2**1024 no longer fits in a float
_MAX_FLOAT_EXPONENT = 1023


def expected_crack_seconds(
    entropy_bits: float,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
) -> float:
    """Average-case seconds to exhaust a keyspace of ``2**entropy_bits``.

    Returns ``math.inf`` when the keyspace overflows a float.
    """
    if guesses_per_second <= 0:
        raise ValueError("guesses_per_second must be positive")
    if entropy_bits <= 0:
        return 1 / guesses_per_second / 2
    if entropy_bits > _MAX_FLOAT_EXPONENT:
        return math.inf
    return 2.0 ** entropy_bits / guesses_per_second / 2


def format_crack_time(seconds: float) -> str:
    """Render *seconds* as a human-readable duration."""
    if seconds < 1:
        return "instant"
    if seconds < _MINUTE:
        return f"{int(seconds)} seconds"
    if seconds < _HOUR:
        return f"{int(seconds / _MINUTE)} minutes"
    if seconds < _DAY:
        return f"{int(seconds / _HOUR)} hours"
    if seconds < _YEAR:
        return f"{int(seconds / _DAY)} days"
    if seconds < _MILLENNIUM:
        return f"{int(seconds / _YEAR)} years"
    return "centuries"


def estimate_crack_time(
    entropy_bits: float,
    guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
) -> str:
    """Format the expected crack time for *entropy_bits*."""
    return format_crack_time(expected_crack_seconds(entropy_bits, guesses_per_second))
