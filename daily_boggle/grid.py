"""4x4 letter grid, tile adjacency and seeded grid generation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

from daily_boggle.constants import CELL_COUNT, GRID_SIZE, LETTER_BAG, QU_CHANCE
from daily_boggle.rng import Mulberry32, new_generator


class Tile(Enum):
    """Content of one grid cell: a single letter or the combined QU tile."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    QU = "qu"

    @property
    def letters(self) -> str:
        """Letters this tile contributes to a word (two for QU)."""
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()


def index_to_coord(index: int) -> tuple[int, int]:
    """Returns (row, col) of a grid index."""
    return index // GRID_SIZE, index % GRID_SIZE


def is_adjacent(a: int, b: int) -> bool:
    """True if the two cells touch horizontally, vertically or diagonally."""
    ar, ac = index_to_coord(a)
    br, bc = index_to_coord(b)
    dr = abs(ar - br)
    dc = abs(ac - bc)
    if dr == 0 and dc == 0:
        return False
    return max(dr, dc) == 1


# Neighbours of every cell, ascending
NEIGHBORS: tuple[tuple[int, ...], ...] = tuple(
    tuple(n for n in range(CELL_COUNT) if is_adjacent(i, n))
    for i in range(CELL_COUNT)
)


def is_valid_path(path: Sequence[int]) -> bool:
    """A path is non-empty, stays on the grid, never repeats a cell and only
    steps between adjacent cells."""
    if not path:
        return False
    if any(not 0 <= i < CELL_COUNT for i in path):
        return False
    if len(set(path)) != len(path):
        return False
    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))


@dataclass(frozen=True)
class Grid:
    """Immutable 4x4 grid of tiles in row-major order."""

    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        if len(self.tiles) != CELL_COUNT:
            raise ValueError(
                f"A grid has exactly {CELL_COUNT} tiles, got {len(self.tiles)}"
            )

    @classmethod
    def from_letters(cls, letters: str | Iterable[str]) -> Grid:
        """Build a grid from tokens like ``"b,d,a,qu,..."`` or ``["b", "d", ...]``.

        Each token must be a single letter or ``qu``, in any case.
        """
        if isinstance(letters, str):
            tokens = [t for t in re.split(r"[,\s]+", letters.strip()) if t]
        else:
            tokens = [str(t).strip() for t in letters]
        tiles: list[Tile] = []
        for token in tokens:
            try:
                tiles.append(Tile(token.lower()))
            except ValueError:
                raise ValueError(f"Invalid tile {token!r}: expected a letter or 'qu'") from None
        return cls(tuple(tiles))

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def letters(self, index: int) -> str:
        return self.tiles[index].letters

    def word_for_path(self, path: Sequence[int]) -> str:
        """Concatenate the letters along *path*."""
        return "".join(self.tiles[i].letters for i in path)

    def rows(self) -> list[list[Tile]]:
        return [list(self.tiles[r * GRID_SIZE:(r + 1) * GRID_SIZE]) for r in range(GRID_SIZE)]

    def to_list(self) -> list[str]:
        return [tile.value for tile in self.tiles]


def grid_from_generator(rng: Mulberry32) -> Grid:
    """Fill the 16 cells in order from *rng*.

    Each cell draws once for the QU chance and, failing that, once more to
    pick from the letter bag. The number and order of draws are fixed.
    """
    tiles: list[Tile] = []
    for _ in range(CELL_COUNT):
        if rng.random() < QU_CHANCE:
            tiles.append(Tile.QU)
            continue
        tiles.append(Tile(LETTER_BAG[rng.randint(len(LETTER_BAG))]))
    return Grid(tuple(tiles))


def generate_grid(seed: int) -> Grid:
    """Generate the grid for a seed."""
    return grid_from_generator(new_generator(seed))
