"""Game state: phases, the current question and the running score."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .models import AnswerRecord, GameConfig, GamePhase, Question
from .questions import generate_questions

logger = logging.getLogger(__name__)

MAX_ANSWER_DIGITS = 4


class ScoreKeeper:
    """Counts correct answers."""

    def __init__(self) -> None:
        self.score = 0

    def record(self, question: Question, given: int) -> bool:
        correct = given == question.answer
        if correct:
            self.score += 1
        return correct

    def reset(self) -> None:
        self.score = 0


class GameSession:
    """Owns everything the scenes read and mutate during a game.

    Transitions that do not apply to the current phase are ignored, so every
    event coming from the UI leaves the session in a valid state.
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng
        self.phase = GamePhase.CONFIGURING
        self.questions: List[Question] = []
        self.current_index = 0
        self.pending_answer = 0
        self.history: List[AnswerRecord] = []
        self._scores = ScoreKeeper()

    # Read-only views ------------------------------------------------
    @property
    def score(self) -> int:
        return self._scores.score

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def question_number(self) -> int:
        return self.current_index + 1

    @property
    def current_question(self) -> Optional[Question]:
        if self.phase is not GamePhase.PLAYING:
            return None
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    # Transitions ----------------------------------------------------
    def start(self, questions: Sequence[Question] | None = None) -> None:
        """Begin a new game from any phase with a fresh question batch."""

        if questions is None:
            batch = generate_questions(self.config.max_table_unit, self.config.questions_amount, self.rng)
        else:
            batch = list(questions)
        if not batch:
            raise ValueError("A game needs at least one question")

        self._reset_progress()
        self.questions = batch
        self._set_phase(GamePhase.PLAYING)

    def restart(self) -> None:
        self.start()

    def submit_answer(self, value: int | None = None) -> Optional[AnswerRecord]:
        question = self.current_question
        if question is None:
            logger.debug("Ignoring answer while %s", self.phase.value)
            return None

        given = self.pending_answer if value is None else value
        correct = self._scores.record(question, given)
        record = AnswerRecord(question=question, given=given, correct=correct)
        self.history.append(record)
        self.pending_answer = 0

        if self.current_index == len(self.questions) - 1:
            self._set_phase(GamePhase.SCORED)
        else:
            self.current_index += 1
        return record

    def quit(self) -> None:
        """Return to the configuration screen, dropping the finished game."""

        self._reset_progress()
        self.questions = []
        self._set_phase(GamePhase.CONFIGURING)

    # Answer entry ---------------------------------------------------
    def enter_digit(self, digit: int) -> int:
        if not 0 <= digit <= 9:
            raise ValueError(f"Not a single digit: {digit}")
        if len(str(self.pending_answer)) < MAX_ANSWER_DIGITS:
            self.pending_answer = self.pending_answer * 10 + digit
        return self.pending_answer

    def erase_digit(self) -> int:
        self.pending_answer //= 10
        return self.pending_answer

    def clear_answer(self) -> None:
        self.pending_answer = 0

    # Internal helpers ----------------------------------------------
    def _reset_progress(self) -> None:
        self._scores.reset()
        self.current_index = 0
        self.pending_answer = 0
        self.history = []

    def _set_phase(self, phase: GamePhase) -> None:
        if phase is not self.phase:
            logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase


__all__ = ["GameSession", "ScoreKeeper", "MAX_ANSWER_DIGITS"]
