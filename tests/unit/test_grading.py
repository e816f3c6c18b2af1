"""
Тесты для Grading — баллы в буквенную оценку
"""

import pytest

from src.core.domain.grading import (
    GRADE_BANDS,
    Grade,
    InvalidScoreError,
    grade_for_score,
)


class TestGradeForScore:
    """Тесты для grade_for_score"""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, Grade.A_PLUS),
            (80, Grade.A_PLUS),
            (79, Grade.A),
            (75, Grade.A),
            (74, Grade.A_MINUS),
            (69, Grade.B_PLUS),
            (64, Grade.B),
            (59, Grade.B_MINUS),
            (54, Grade.C_PLUS),
            (49, Grade.C),
            (44, Grade.D),
            (40, Grade.D),
            (39, Grade.F),
            (0, Grade.F),
        ],
    )
    def test_band_boundaries(self, score: int, expected: Grade) -> None:
        assert grade_for_score(score) is expected

    def test_grade_values_are_labels(self) -> None:
        assert grade_for_score(77).value == "A"
        assert grade_for_score(90).value == "A+"

    @pytest.mark.parametrize("score", [-1, 101, 1000])
    def test_out_of_range_raises(self, score: int) -> None:
        with pytest.raises(InvalidScoreError, match="Invalid score"):
            grade_for_score(score)

    def test_bands_descending_and_cover_zero(self) -> None:
        bounds = [lower for lower, _ in GRADE_BANDS]
        assert bounds == sorted(bounds, reverse=True)
        assert bounds[-1] == 0
