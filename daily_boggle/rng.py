"""Deterministic seed derivation and pseudo-random generator.

Both are bit-exact ports of the 32-bit integer routines every client uses, so
a puzzle id always yields the same grid no matter which implementation draws
it. All arithmetic is modulo 2**32.
"""

from __future__ import annotations

from dataclasses import dataclass, field

UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & UINT32_MASK


def _code_units(text: str) -> list[int]:
    """UTF-16 code units of *text* (identical to the bytes for ASCII)."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def derive_seed(puzzle_id: str) -> int:
    """Hash a puzzle id to an unsigned 32-bit seed."""
    units = _code_units(puzzle_id)
    h = (1779033703 ^ len(units)) & UINT32_MASK
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & UINT32_MASK
    h = _imul(h ^ (h >> 16), 2246822507)
    h = _imul(h ^ (h >> 13), 3266489909)
    return h ^ (h >> 16)


@dataclass
class Mulberry32:
    """Mulberry32 generator with a ``random.random``-like interface."""

    seed: int
    _state: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # A zero seed is replaced with 1
        self._state = (self.seed & UINT32_MASK) or 1

    def next_uint32(self) -> int:
        """Advance the state and return the next raw 32-bit output."""
        t = (self._state + 0x6D2B79F5) & UINT32_MASK
        self._state = t
        r = _imul(t ^ (t >> 15), t | 1)
        r = ((r + _imul(r ^ (r >> 7), r | 61)) & UINT32_MASK) ^ r
        return (r ^ (r >> 14)) & UINT32_MASK

    def random(self) -> float:
        """Return a float in [0, 1)."""
        return self.next_uint32() / UINT32_SCALE

    def randint(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)


def new_generator(seed: int) -> Mulberry32:
    return Mulberry32(seed)
