"""Exhaustive prefix-pruned word finder for a 4x4 grid."""

from __future__ import annotations

import logging
from typing import Iterable

from daily_boggle.constants import CELL_COUNT, MIN_WORD_LENGTH
from daily_boggle.dictionary import DictionaryIndex
from daily_boggle.grid import NEIGHBORS, Grid

_log = logging.getLogger(__name__)


def sort_words(words: Iterable[str]) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))


def solve(grid: Grid, index: DictionaryIndex) -> list[str]:
    """Find every dictionary word that can be traced on *grid*.

    Each starting cell is searched on its own and the results are merged
    once all 16 searches are done.
    """
    results: set[str] = set()
    for start in range(CELL_COUNT):
        results |= _solve_from(grid, index, start)
    words = sort_words(results)
    _log.debug("Solved grid %s: %d words", "".join(grid.to_list()), len(words))
    return words


def _solve_from(grid: Grid, index: DictionaryIndex, start: int) -> set[str]:
    found: set[str] = set()
    prefixes = index.prefixes
    words = index.words

    def _search(position: int, visited: int, current: str) -> None:
        word = current + grid.letters(position)
        if word not in prefixes:
            return
        visited |= 1 << position
        if len(word) >= MIN_WORD_LENGTH and word in words:
            found.add(word)
        for neighbor in NEIGHBORS[position]:
            if not visited & (1 << neighbor):
                _search(neighbor, visited, word)

    _search(start, 0, "")
    return found


def find_path(grid: Grid, word: str) -> list[int] | None:
    """Return one path of cells spelling *word*, or None if there is none.

    A QU tile must match "qu" as a unit.
    """
    if not word:
        return None

    def _trace(position: int, offset: int, path: list[int]) -> list[int] | None:
        letters = grid.letters(position)
        if not word.startswith(letters, offset):
            return None
        path.append(position)
        offset += len(letters)
        if offset == len(word):
            return path
        for neighbor in NEIGHBORS[position]:
            if neighbor not in path:
                found = _trace(neighbor, offset, path)
                if found is not None:
                    return found
        path.pop()
        return None

    for start in range(CELL_COUNT):
        found = _trace(start, 0, [])
        if found is not None:
            return found
    return None
