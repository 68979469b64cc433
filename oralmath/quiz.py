"""Drawing a random paper from the bank and scoring it."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

FULL_MARKS = 100


class NotEnoughQuestionsError(ValueError):
    """Raised when more questions are requested than the bank holds."""


def draw_questions(
    questions: Sequence[T], count: int, rng: random.Random | None = None
) -> list[T]:
    """Return *count* distinct questions in random order."""
    if count < 0:
        raise ValueError("题目数量不能为负数!")
    if count > len(questions):
        raise NotEnoughQuestionsError("题目数量不足,无法完成随机抽题!")
    pool = list(questions)
    (rng or random.Random()).shuffle(pool)
    return pool[:count]


def points_per_question(count: int) -> int:
    """Return the whole points each question is worth on a paper of *count*."""
    if count <= 0:
        raise ValueError("题目数量必须为正数!")
    return FULL_MARKS // count