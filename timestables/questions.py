"""Random question batches for a game."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .models import MIN_TABLE_UNIT, RIGHT_FACTOR_RANGE, Question

logger = logging.getLogger(__name__)


def generate_questions(
    max_table_unit: int,
    questions_amount: int,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """Return ``questions_amount`` questions drawn uniformly at random.

    The left factor comes from ``[2, max_table_unit]`` and the right factor
    from ``[1, 9]``. Duplicates are allowed.
    """

    if max_table_unit < MIN_TABLE_UNIT:
        raise ValueError(f"max_table_unit must be at least {MIN_TABLE_UNIT}, got {max_table_unit}")
    if questions_amount < 0:
        raise ValueError(f"questions_amount cannot be negative, got {questions_amount}")

    source = rng or random
    low, high = RIGHT_FACTOR_RANGE
    questions: List[Question] = []
    while len(questions) < questions_amount:
        left = source.randint(MIN_TABLE_UNIT, max_table_unit)
        right = source.randint(low, high)
        questions.append(Question(left, right))
    logger.debug("Generated %d questions up to table %d", len(questions), max_table_unit)
    return questions


__all__ = ["generate_questions"]
