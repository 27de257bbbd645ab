"""Dataclasses used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

MIN_TABLE_UNIT = 2
MAX_TABLE_UNIT = 12
QUESTION_AMOUNTS: Tuple[int, ...] = (5, 10, 20)
RIGHT_FACTOR_RANGE = (1, 9)


class GamePhase(Enum):
    CONFIGURING = "configuring"
    PLAYING = "playing"
    SCORED = "scored"


@dataclass(frozen=True)
class Question:
    left: int
    right: int

    @property
    def answer(self) -> int:
        return self.left * self.right

    def as_text(self) -> str:
        return f"{self.left} x {self.right}"


@dataclass(frozen=True)
class AnswerRecord:
    question: Question
    given: int
    correct: bool


@dataclass
class GameConfig:
    """Table range and question count picked on the configuration screen."""

    max_table_unit: int = MIN_TABLE_UNIT
    questions_amount: int = QUESTION_AMOUNTS[0]

    def __post_init__(self) -> None:
        self.step_table(0)
        self.select_amount(self.questions_amount)

    def step_table(self, delta: int) -> int:
        """Move the table limit by ``delta``, clamped to the allowed range."""

        self.max_table_unit = max(MIN_TABLE_UNIT, min(MAX_TABLE_UNIT, self.max_table_unit + delta))
        return self.max_table_unit

    def select_amount(self, amount: int) -> None:
        if amount not in QUESTION_AMOUNTS:
            raise ValueError(f"Question amount must be one of {QUESTION_AMOUNTS}, got {amount}")
        self.questions_amount = amount

    def cycle_amount(self, step: int) -> int:
        index = QUESTION_AMOUNTS.index(self.questions_amount)
        self.questions_amount = QUESTION_AMOUNTS[(index + step) % len(QUESTION_AMOUNTS)]
        return self.questions_amount


__all__ = [
    "AnswerRecord",
    "GameConfig",
    "GamePhase",
    "MAX_TABLE_UNIT",
    "MIN_TABLE_UNIT",
    "QUESTION_AMOUNTS",
    "Question",
    "RIGHT_FACTOR_RANGE",
]
