"""Daily Boggle game constants: grid layout, letter bag and game rules."""

# 4x4 grid, indexed 0..15 in row-major order
GRID_SIZE = 4
CELL_COUNT = GRID_SIZE * GRID_SIZE

# Letter bag sampled uniformly; repetition encodes English letter frequency.
# Order is significant: changing it changes every puzzle.
LETTER_BAG: tuple[str, ...] = (
    "e", "e", "e", "e", "e", "e",
    "a", "a", "a", "a",
    "i", "i", "i",
    "o", "o", "o",
    "n", "n",
    "r", "r", "r",
    "t", "t", "t",
    "l", "l",
    "s", "s",
    "d", "d",
    "g", "b", "c", "m", "p", "f", "h", "v", "w", "y", "k", "x", "z",
)

# Probability that a cell becomes the combined "qu" tile
QU_CHANCE = 0.08

# Shortest word that counts, both in the dictionary and on the board
MIN_WORD_LENGTH = 3

# Length of one game in seconds
GAME_SECONDS = 120

# Puzzle ids look like "2024-01-15-v1"; the day rolls over in Paris
PUZZLE_VERSION = "v1"
PUZZLE_TIMEZONE = "Europe/Paris"
