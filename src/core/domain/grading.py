"""
Grading — перевод баллов (0-100) в буквенную оценку
"""

from enum import Enum
from typing import Final


class Grade(str, Enum):
    """Буквенная оценка"""

    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    D = "D"
    F = "F"


class InvalidScoreError(ValueError):
    """Балл вне диапазона [0, 100]."""

    def __init__(self, score: int):
        self.score = score
        super().__init__(f"Invalid score: {score} (expected 0-100)")


# Нижние границы диапазонов, по убыванию
GRADE_BANDS: Final[tuple[tuple[int, Grade], ...]] = (
    (80, Grade.A_PLUS),
    (75, Grade.A),
    (70, Grade.A_MINUS),
    (65, Grade.B_PLUS),
    (60, Grade.B),
    (55, Grade.B_MINUS),
    (50, Grade.C_PLUS),
    (45, Grade.C),
    (40, Grade.D),
    (0, Grade.F),
)

SCORE_MIN: Final[int] = 0
SCORE_MAX: Final[int] = 100


def grade_for_score(score: int) -> Grade:
    """
    Оценка по баллу.

    Raises:
        InvalidScoreError: Если score вне [0, 100]

    Examples:
        >>> grade_for_score(77).value
        'A'
        >>> grade_for_score(39).value
        'F'
    """
    if score < SCORE_MIN or score > SCORE_MAX:
        raise InvalidScoreError(score)

    for lower_bound, grade in GRADE_BANDS:
        if score >= lower_bound:
            return grade

    # Недостижимо: последняя граница равна SCORE_MIN
    raise InvalidScoreError(score)
