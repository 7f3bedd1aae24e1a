"""
Shared pytest fixtures
======================
Deterministic random sources and small registries for PassForge tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge.core.charsets import CharsetRegistry, WordCorpus


class SeededRandomSource:
    """RandomSource backed by a seeded ``random.Random``."""

    def __init__(self, seed=1234):
        self._random = random.Random(seed)

    def uniform_int(self, n):
        if n <= 0:
            raise ValueError("uniform_int() requires n > 0")
        return self._random.randrange(n)

    def sample(self, seq):
        if not seq:
            raise ValueError("cannot sample from an empty sequence")
        return seq[self._random.randrange(len(seq))]


class ScriptedRandomSource:
    """RandomSource that replays a fixed list of ``uniform_int`` answers.

    ``sample`` consumes one answer as an index into the sequence.
    """

    def __init__(self, answers):
        self._answers = list(answers)

    def uniform_int(self, n):
        value = self._answers.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value

    def sample(self, seq):
        return seq[self.uniform_int(len(seq))]


SMALL_WORDS = ("apple", "breeze", "cactus", "dolphin", "ember")


@pytest.fixture
def rng():
    """Deterministic random source."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def small_registry():
    """Registry with the default classes and a five-word corpus."""
    return CharsetRegistry(corpus=WordCorpus(SMALL_WORDS))
