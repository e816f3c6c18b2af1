"""
Numerical Safeguards — общие примитивы сравнения и валидации

Модуль содержит примитивы, на которые опираются все упражнения:
- Epsilon-константы для сравнений float
- Проверка конечности (NaN/Inf)
- Сравнения с толерантностью (дискриминант, нули)
- Валидация неотрицательных входов (NegativeInputError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не принимаются валидаторами
2. Отрицательный вход там, где он запрещён, всегда → NegativeInputError
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NegativeInputError(ValueError):
    """
    Отрицательный вход для операции, определённой только на x >= 0.

    Используется факториалом, квадратным корнем, двоичной записью
    и суммами операций со счётом. Ошибка восстанавливаемая: вызывающий
    код печатает её и продолжает работу.
    """

    def __init__(self, name: str, value: float, message: str | None = None):
        self.name = name
        self.value = value
        super().__init__(message or f"{name} must be non-negative, got {value}")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    При tol=0.0 сравнение точное.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (>= 0)

    Returns:
        -1 если a < b, 0 если a ≈ b, +1 если a > b

    Raises:
        ValueError: Если tol < 0

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
        >>> compare_with_tolerance(1e-13, 0.0, tol=0.0)
        1
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
        NegativeInputError: Если value < 0
    """
    validate_finite(value, name)

    if value < 0:
        raise NegativeInputError(name, value)
