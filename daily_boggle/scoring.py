"""Scoring of submitted words."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from daily_boggle.constants import MIN_WORD_LENGTH
from daily_boggle.dictionary import normalize_word

# Penalty for short, repeated or unknown words
PENALTY = -1


class SubmissionStatus(Enum):
    NEW = "new"
    DUPLICATE = "duplicate"
    INVALID = "invalid"


@dataclass(frozen=True)
class Submission:
    """One scored submission as recorded in the game log."""
    word: str
    delta: int
    status: SubmissionStatus

    def to_json(self) -> dict:
        return {"word": self.word, "delta": self.delta, "status": self.status.value}


def score_delta(word: str, already_found: Collection[str],
                solutions: Collection[str]) -> tuple[int, SubmissionStatus]:
    """Score a candidate against the words already found and the grid's solutions.

    A new word is worth its length minus 2. Short, repeated and untraceable
    words all cost one point.
    """
    candidate = normalize_word(word)
    if len(candidate) < MIN_WORD_LENGTH:
        return PENALTY, SubmissionStatus.INVALID
    if candidate in already_found:
        return PENALTY, SubmissionStatus.DUPLICATE
    if candidate in solutions:
        return len(candidate) - 2, SubmissionStatus.NEW
    return PENALTY, SubmissionStatus.INVALID


def apply_delta(score: int, delta: int) -> int:
    """Running score never drops below zero."""
    return max(0, score + delta)
