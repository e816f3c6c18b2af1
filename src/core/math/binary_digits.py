"""
Binary Digits — рекурсивная двоичная запись числа

Рекуррентность:
    f(0) = ""
    f(n) = f(n // 2) + str(n % 2)

Для n шире _CHUNK_BITS бит число делится пополам по разрядам:
    f(n) = f(n >> k) + f(n & (2**k - 1)), младшая половина дополняется
    нулями до k знаков. Глубина рекурсии растёт как log2 от числа бит.

Результат: строка цифр, а не десятичный литерал вида 101 (int);
строка не ограничена по длине и не теряет старшие разряды.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_binary_digits(0) == "0"
2. Отрицательный вход → NegativeInputError (рекурсия для n < 0 не сходится)
3. int(to_binary_digits(n), 2) == n для любого n >= 0
"""

from typing import Final

from src.core.math.numerical_safeguards import NegativeInputError

_CHUNK_BITS: Final[int] = 64


def _digits(n: int) -> str:
    if n == 0:
        return ""
    return _digits(n // 2) + str(n % 2)


def _split_digits(n: int) -> str:
    bits = n.bit_length()
    if bits <= _CHUNK_BITS:
        return _digits(n)

    half = bits // 2
    high = _split_digits(n >> half)
    low = _split_digits(n & ((1 << half) - 1))
    return high + low.rjust(half, "0")


def to_binary_digits(n: int) -> str:
    """
    Двоичная запись неотрицательного целого.

    Args:
        n: Неотрицательное целое

    Returns:
        Строка из символов '0'/'1' без ведущих нулей ("0" для n == 0)

    Raises:
        TypeError: Если n не int (bool тоже отвергается)
        NegativeInputError: Если n < 0

    Examples:
        >>> to_binary_digits(5)
        '101'
        >>> to_binary_digits(10)
        '1010'
        >>> to_binary_digits(0)
        '0'
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")

    if n < 0:
        raise NegativeInputError("n", n)

    return _split_digits(n) or "0"


def binary_digits_as_int(n: int) -> int:
    """
    Двоичные цифры n в виде десятичного литерала: 5 → 101.

    Строится из to_binary_digits; для больших n число очень длинное.
    """
    return int(to_binary_digits(n))
