"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Epsilon-сравнения float
3. Валидацию параметров и NegativeInputError
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    NegativeInputError,
    compare_with_tolerance,
    is_close,
    is_valid_float,
    is_zero,
    validate_finite,
    validate_non_negative,
)


class TestConstants:
    """Проверка значений epsilon-констант"""

    def test_constants_positive(self) -> None:
        assert EPS_CALC > 0
        assert EPS_FLOAT_COMPARE_ABS > 0
        assert EPS_FLOAT_COMPARE_REL > 0


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e300)

    def test_nan_and_inf_invalid(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_tiny_difference_is_close(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)

    def test_large_difference_not_close(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_near_zero_uses_abs_tol(self) -> None:
        assert is_close(0.0, 1e-13)


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(-0.0)

    def test_within_tolerance(self) -> None:
        assert is_zero(1e-13)
        assert not is_zero(1e-6)
        assert is_zero(1e-6, tol=1e-5)


class TestCompareWithTolerance:
    """Тесты для compare_with_tolerance"""

    def test_ordering(self) -> None:
        assert compare_with_tolerance(1.0, 2.0) == -1
        assert compare_with_tolerance(2.0, 1.0) == 1

    def test_equal_within_tolerance(self) -> None:
        assert compare_with_tolerance(1.0, 1.0 + 1e-13) == 0

    def test_zero_tolerance_is_exact(self) -> None:
        """tol=0.0 → точное сравнение"""
        assert compare_with_tolerance(1e-13, 0.0, tol=0.0) == 1
        assert compare_with_tolerance(-1e-13, 0.0, tol=0.0) == -1
        assert compare_with_tolerance(0.0, 0.0, tol=0.0) == 0

    def test_negative_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="tol must be non-negative"):
            compare_with_tolerance(1.0, 1.0, tol=-1e-9)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_finite_passes(self) -> None:
        validate_finite(3.0, "x")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="x must be a valid float"):
            validate_finite(math.nan, "x")


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_zero_and_positive_pass(self) -> None:
        validate_non_negative(0.0, "amount")
        validate_non_negative(10.0, "amount")

    def test_negative_raises_negative_input_error(self) -> None:
        with pytest.raises(NegativeInputError, match="amount must be non-negative") as exc_info:
            validate_non_negative(-1.0, "amount")

        assert exc_info.value.name == "amount"
        assert exc_info.value.value == -1.0

    def test_negative_input_error_is_value_error(self) -> None:
        """NegativeInputError ловится как ValueError"""
        with pytest.raises(ValueError):
            validate_non_negative(-1.0, "amount")

    def test_inf_raises_plain_value_error(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf") as exc_info:
            validate_non_negative(float("inf"), "amount")

        assert not isinstance(exc_info.value, NegativeInputError)
