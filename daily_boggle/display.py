"""Terminal rendering of the grid and word lists."""

from __future__ import annotations

from typing import Collection, Mapping, Sequence

from daily_boggle.grid import Grid
from daily_boggle.puzzle import GameSession


def render_grid(grid: Grid) -> str:
    """Render the grid as a string for terminal display."""
    lines: list[str] = []
    border = "+" + "----" * len(grid.rows()[0]) + "+"
    lines.append(border)
    for row in grid.rows():
        lines.append("|" + "".join(f"{tile.label:^4s}" for tile in row) + "|")
    lines.append(border)
    return "\n".join(lines)


def print_grid(grid: Grid) -> None:
    """Print the grid to the terminal."""
    print("\n" + render_grid(grid))


def print_solutions(words: Sequence[str], found: Collection[str] = (),
                    paths: Mapping[str, Sequence[int]] | None = None) -> None:
    """Print the solution list, marking words the player found."""
    if not words:
        print("No dictionary words.")
        return

    print(f"\n{len(words)} words on this grid:")
    for word in words:
        mark = "*" if word in found else " "
        line = f" {mark} {word:<16s} {len(word) - 2:>2d} pts"
        if paths is not None and word in paths:
            line += "  " + "-".join(str(i) for i in paths[word])
        print(line)


def print_summary(session: GameSession) -> None:
    """Print the final score after a game."""
    print(f"\nFinal score {session.score}")
    print(f"Words {len(session.found_words)}/{session.puzzle.total_words}")
    print(session.share_text())
