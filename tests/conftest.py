"""Shared fixtures for Daily Boggle tests."""

from __future__ import annotations

import pytest

from daily_boggle.dictionary import DictionaryIndex, build_index
from daily_boggle.grid import Grid

# Grid generated for "2024-01-15-v1":
#   b  d  a  qu
#   qu e  r  i
#   qu qu e  i
#   k  s  z  c
DAILY_TILES = ["b", "d", "a", "qu", "qu", "e", "r", "i",
               "qu", "qu", "e", "i", "k", "s", "z", "c"]


@pytest.fixture
def small_index() -> DictionaryIndex:
    """Hand-picked words in raw list form: mixed case, CRLF, junk lines."""
    raw = (
        "Bed\nRED\nquire\nqueer\ndare\r\nread\nbead\nbread\naired\nzebra\n"
        "cat\nqu\nre\nQuiz\ndear\nrid\nride\nires\nquiet\nsee\n"
    )
    return build_index(raw)


@pytest.fixture
def daily_grid() -> Grid:
    return Grid.from_letters(DAILY_TILES)


@pytest.fixture
def cats_index() -> DictionaryIndex:
    return build_index("cat\ncats\nact\n")


@pytest.fixture
def cats_grid() -> Grid:
    """c, a and t share a 2x2 corner so every ordering of them is traceable;
    s sits beside t.

        c  a  s  x
        x  t  x  x
        x  x  x  x
        x  x  x  x
    """
    return Grid.from_letters("c a s x  x t x x  x x x x  x x x x")
