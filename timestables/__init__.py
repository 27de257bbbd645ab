"""Multiplication tables quiz built on pygame."""

from .models import GameConfig, GamePhase, Question
from .questions import generate_questions
from .session import GameSession, ScoreKeeper

__all__ = [
    "GameConfig",
    "GamePhase",
    "GameSession",
    "Question",
    "ScoreKeeper",
    "generate_questions",
]
