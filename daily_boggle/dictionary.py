"""Word and prefix index built from a newline-delimited word list."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from daily_boggle.constants import MIN_WORD_LENGTH

_log = logging.getLogger(__name__)

# Overrides the location of the default word list
WORDS_ENV_VAR = "DAILY_BOGGLE_WORDS"

_NEWLINE = re.compile(r"\r\n|\r|\n")
_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_word(raw: str) -> str:
    """Lowercase *raw* and drop everything outside a-z."""
    return _NON_LETTERS.sub("", raw.strip().lower())


@dataclass(frozen=True)
class DictionaryIndex:
    """Read-only set of valid words plus every prefix of every word.

    ``loaded`` is False for the empty stand-in used when no word list could
    be read; such an index accepts nothing.
    """

    words: frozenset[str] = field(default_factory=frozenset)
    prefixes: frozenset[str] = field(default_factory=frozenset)
    loaded: bool = True

    @classmethod
    def empty(cls) -> DictionaryIndex:
        return cls(loaded=False)

    def is_valid_word(self, word: str) -> bool:
        return word in self.words

    def has_prefix(self, prefix: str) -> bool:
        return prefix in self.prefixes

    @property
    def word_count(self) -> int:
        return len(self.words)


def build_index(text: str) -> DictionaryIndex:
    """Build the index from raw word-list text, one candidate per line."""
    words: set[str] = set()
    prefixes: set[str] = set()
    for line in _NEWLINE.split(text):
        word = normalize_word(line)
        if len(word) < MIN_WORD_LENGTH:
            continue
        words.add(word)
        for i in range(1, len(word) + 1):
            prefixes.add(word[:i])
    return DictionaryIndex(frozenset(words), frozenset(prefixes))


def load_dictionary(path: str | Path) -> DictionaryIndex:
    """Load a word list from a file. I/O errors propagate."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    index = build_index(text)
    _log.info("Loaded %d words from %s", index.word_count, path)
    return index


def default_dictionary_path() -> Path:
    override = os.environ.get(WORDS_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "data" / "words.txt"


def load_default_dictionary() -> DictionaryIndex:
    """Load the bundled word list, or an empty index if it can't be read.

    With an empty index no word is ever findable; callers check
    ``index.loaded`` to tell the player the game is limited.
    """
    path = default_dictionary_path()
    try:
        return load_dictionary(path)
    except OSError as e:
        _log.warning("Unable to load dictionary from %s (%s); no words will be findable", path, e)
        return DictionaryIndex.empty()
