"""Exceptions raised by the suggestion engine.

Callers can catch ``AutocompleteError`` for everything, or the built-in
base (``ValueError`` / ``RuntimeError``) each subclass also derives from.
"""

from __future__ import annotations


class AutocompleteError(Exception):
    """Base exception for all engine errors."""


class EmptyQueryError(AutocompleteError, ValueError):
    """The query was empty; rejected before any lookup runs."""


class DictionaryUnavailableError(AutocompleteError, RuntimeError):
    """The word list or cached index could not be read. Fatal for the call."""


class EngineNotReadyError(AutocompleteError, RuntimeError):
    """A query arrived before build() or load()."""
