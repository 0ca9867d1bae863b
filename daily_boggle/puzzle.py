"""Daily puzzle assembly and a single player's timed game session."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Sequence
from zoneinfo import ZoneInfo

from daily_boggle.constants import (
    GAME_SECONDS,
    MIN_WORD_LENGTH,
    PUZZLE_TIMEZONE,
    PUZZLE_VERSION,
)
from daily_boggle.dictionary import DictionaryIndex, normalize_word
from daily_boggle.grid import Grid, generate_grid, is_valid_path
from daily_boggle.rng import derive_seed
from daily_boggle.scoring import Submission, SubmissionStatus, apply_delta, score_delta
from daily_boggle.solver import solve

_log = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    """Raised when submitting to a game that isn't running."""


def puzzle_id_for(day: date) -> str:
    return f"{day.isoformat()}-{PUZZLE_VERSION}"


def parse_puzzle_date(text: str) -> date:
    """Parse a YYYY-MM-DD date, raising ValueError on anything else."""
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        raise ValueError(f"Invalid date {text!r}: expected YYYY-MM-DD") from None


def today_puzzle_id(now: datetime | None = None) -> str:
    """Id of the puzzle for the current Paris calendar day.

    Naive datetimes are taken to be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(ZoneInfo(PUZZLE_TIMEZONE))
    return puzzle_id_for(local.date())


@dataclass(frozen=True)
class Puzzle:
    """A generated grid together with every word it contains."""
    puzzle_id: str
    seed: int
    grid: Grid
    solutions: tuple[str, ...]
    solution_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "solution_set", frozenset(self.solutions))

    @classmethod
    def build(cls, puzzle_id: str, index: DictionaryIndex) -> Puzzle:
        seed = derive_seed(puzzle_id)
        return cls.from_grid(puzzle_id, seed, generate_grid(seed), index)

    @classmethod
    def from_grid(cls, puzzle_id: str, seed: int, grid: Grid,
                  index: DictionaryIndex) -> Puzzle:
        solutions = tuple(solve(grid, index))
        _log.info("Puzzle %s (seed %d): %d words", puzzle_id, seed, len(solutions))
        return cls(puzzle_id, seed, grid, solutions)

    @property
    def total_words(self) -> int:
        return len(self.solutions)


class GameSession:
    """One timed play-through of a puzzle.

    Tracks the running score (floored at zero), the words found in order of
    discovery and every submission in the order it was made.
    """

    def __init__(self, puzzle: Puzzle, time_limit: float = GAME_SECONDS) -> None:
        self.puzzle = puzzle
        self.time_limit = time_limit
        self.started_at: float | None = None
        self.finished = False
        self.score = 0
        self.found_words: list[str] = []
        self.submissions: list[Submission] = []
        self._found: set[str] = set()

    def start(self, now: float | None = None) -> None:
        if self.started_at is None:
            self.started_at = time.time() if now is None else now

    def time_left(self, now: float | None = None) -> float:
        if self.started_at is None:
            return float(self.time_limit)
        now = time.time() if now is None else now
        return max(0.0, self.time_limit - (now - self.started_at))

    def is_finished(self, now: float | None = None) -> bool:
        if self.finished:
            return True
        if self.started_at is not None and self.time_left(now) <= 0:
            self.finished = True
        return self.finished

    def is_running(self, now: float | None = None) -> bool:
        return self.started_at is not None and not self.is_finished(now)

    def submit(self, word: str, now: float | None = None) -> Submission:
        """Score *word* and record it. Raises SessionClosedError if the game
        hasn't started or is over."""
        if not self.is_running(now):
            raise SessionClosedError("Game is not running")

        delta, status = score_delta(word, self._found, self.puzzle.solution_set)
        normalized = normalize_word(word)
        if len(normalized) < MIN_WORD_LENGTH:
            logged = word or "(too short)"
        else:
            logged = normalized

        self.score = apply_delta(self.score, delta)
        if status is SubmissionStatus.NEW:
            self._found.add(normalized)
            self.found_words.append(normalized)

        submission = Submission(logged, delta, status)
        self.submissions.append(submission)
        return submission

    def submit_path(self, path: Sequence[int], now: float | None = None) -> Submission:
        """Submit the word spelled by a traced path of cells."""
        if not is_valid_path(path):
            raise ValueError(f"Invalid path {list(path)}: cells must be distinct and adjacent")
        return self.submit(self.puzzle.grid.word_for_path(path), now=now)

    def finish(self) -> None:
        self.finished = True

    def result(self) -> dict:
        """JSON-ready record of the finished game."""
        return {
            "puzzle_id": self.puzzle.puzzle_id,
            "score": self.score,
            "found_words": list(self.found_words),
            "submissions": [s.to_json() for s in self.submissions],
        }

    def share_text(self) -> str:
        return (
            f"Daily Boggle {self.puzzle.puzzle_id} - Score {self.score} - "
            f"Words {len(self.found_words)}/{self.puzzle.total_words}"
        )
