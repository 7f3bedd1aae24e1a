"""
Random Source
==============

The single point through which every generator consumes randomness.
:class:`SystemRandomSource` draws from the operating system CSPRNG via
:mod:`secrets`; tests inject a seeded implementation of the same
:class:`RandomSource` protocol.

Helpers here (:func:`shuffled`, :func:`distinct_sample`, :func:`randint`)
are written against the two protocol methods only, so any conforming
source gets them for free.
"""

from __future__ import annotations

import secrets
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer sampler plus uniform element picker."""

    def uniform_int(self, n: int) -> int:
        """Return an integer uniformly drawn from ``[0, n)``."""
        ...

    def sample(self, seq: Sequence[T]) -> T:
        """Return one element of *seq* chosen uniformly."""
        ...


class SystemRandomSource:
    """Cryptographically strong source backed by :mod:`secrets`.

    ``secrets`` reads from the OS CSPRNG, which is safe to share between
    threads, so one instance can serve the whole process.
    """

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError("uniform_int() requires n > 0")
        return secrets.randbelow(n)

    def sample(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("cannot sample from an empty sequence")
        return seq[secrets.randbelow(len(seq))]

    def __repr__(self) -> str:
        return "SystemRandomSource()"


_DEFAULT_SOURCE = SystemRandomSource()


def default_source() -> SystemRandomSource:
    """Return the process-wide CSPRNG-backed source."""
    return _DEFAULT_SOURCE


def randint(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in the closed range ``[low, high]``."""
    return low + rng.uniform_int(high - low + 1)


def shuffled(rng: RandomSource, items: Sequence[T]) -> list[T]:
    """Return a Fisher-Yates shuffled copy of *items*."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.uniform_int(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def distinct_sample(rng: RandomSource, items: Sequence[T], k: int) -> list[T]:
    """Draw *k* elements without replacement (partial Fisher-Yates).

    Raises:
        ValueError: If *k* is negative or larger than ``len(items)``.
    """
    if k < 0 or k > len(items):
        raise ValueError(f"cannot draw {k} distinct items from {len(items)}")
    pool = list(items)
    picked: list[T] = []
    for i in range(k):
        j = i + rng.uniform_int(len(pool) - i)
        pool[i], pool[j] = pool[j], pool[i]
        picked.append(pool[i])
    return picked
