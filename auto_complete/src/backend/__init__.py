"""Typo-tolerant autocomplete backend: dictionary loading, prefix index, suggestion ranking."""
from .engine import Engine, get_suggestions  # re-export
from .errors import (
    AutocompleteError,
    DictionaryUnavailableError,
    EmptyQueryError,
    EngineNotReadyError,
)

__all__ = [
    "Engine",
    "get_suggestions",
    "AutocompleteError",
    "DictionaryUnavailableError",
    "EmptyQueryError",
    "EngineNotReadyError",
]
