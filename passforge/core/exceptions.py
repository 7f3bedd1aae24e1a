"""
PassForge Exceptions
=====================

Errors raised synchronously by the generation and analysis core. Both
caller-facing errors also derive from :class:`ValueError` so generic
validation handlers keep working.
"""

from __future__ import annotations


class ForgeError(Exception):
    """Base class for every PassForge error."""


class InvalidConfiguration(ForgeError, ValueError):
    """Generation options cannot produce a password.

    Raised for: no usable charset or keywords, a keyword longer than the
    requested length in mixed mode, a word count outside 2..10, an empty
    pattern, or a length below a strategy's minimum.
    """


class EmptyInput(ForgeError, ValueError):
    """A password to analyse or check was empty or ``None``."""


class BreachLookupUnavailable(ForgeError):
    """The breach lookup service could not be reached or answered badly."""
