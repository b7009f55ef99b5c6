import os

TOP_K: int = 10
ENCODING: str = "utf-8"

# Dictionary sources (one word per line); AUTOCOMPLETE_DICT overrides, os.pathsep separated
DEFAULT_DICTIONARIES: list[str] = ["/usr/share/dict/words"]
DICT_ENV_VAR: str = "AUTOCOMPLETE_DICT"
DICT_GLOB: str = "*.txt"   # used when a dictionary path is a directory

# Progress logging (set AUTOCOMPLETE_VERBOSE=1 to enable INFO output)
VERBOSE_ENV_VAR: str = "AUTOCOMPLETE_VERBOSE"

# /* ~~~ typo discovery thresholds: terms of length 5..7 are never admitted ~~~ */
SHORT_TERM_MAX_LEN: int = 4
SHORT_TERM_MAX_DISTANCE: int = 1
LONG_TERM_MIN_LEN: int = 8
LONG_TERM_MAX_DISTANCE: int = 2

# /* ~~~ added to a stem's weight for every completion it yields ~~~ */
PREFIX_BONUS: float = 0.5

# Expansion workers: None -> one worker per stem
MAX_WORKERS: int | None = None


def verbose_enabled() -> bool:
    return os.environ.get(VERBOSE_ENV_VAR) == "1"


def dictionary_paths() -> list[str]:
    raw = os.environ.get(DICT_ENV_VAR, "")
    paths = [p for p in raw.split(os.pathsep) if p.strip()]
    return paths or list(DEFAULT_DICTIONARIES)
