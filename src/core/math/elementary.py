"""
Elementary — факториал, безопасный корень, чётность
"""

import math

from src.core.math.numerical_safeguards import (
    NegativeInputError,
    validate_finite,
)


def factorial(n: int) -> int:
    """
    Факториал n! итеративным произведением.

    Raises:
        TypeError: Если n не int (bool тоже отвергается)
        NegativeInputError: Если n < 0 (факториал не определён)

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")

    if n < 0:
        raise NegativeInputError(
            "n", n, "Factorial is not defined for negative numbers."
        )

    result = 1
    i = 1
    while i <= n:
        result *= i
        i += 1
    return result


def safe_sqrt(num: float) -> float:
    """
    Квадратный корень с ошибкой вместо NaN для отрицательного входа.

    Raises:
        ValueError: Если num NaN/Inf
        NegativeInputError: Если num < 0

    Examples:
        >>> safe_sqrt(25)
        5.0
    """
    validate_finite(num, "num")

    if num < 0:
        raise NegativeInputError(
            "num", num, f"cannot calculate sqrt of negative number: {num:f}"
        )
    return math.sqrt(num)


def is_even(n: int) -> bool:
    return n % 2 == 0


def parity(n: int) -> str:
    """'Even' или 'Odd'. Для отрицательных работает так же (-3 → 'Odd')."""
    return "Even" if is_even(n) else "Odd"
