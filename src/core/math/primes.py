"""
Primes — проверка простоты пробным делением

is_prime(n) работает за O(√n): делители ищутся в [2, isqrt(n)].
Отрицательные числа, 0 и 1 не простые, ошибки для них нет.
"""

import math


def is_prime(n: int) -> bool:
    """
    Проверка простоты числа.

    Args:
        n: Целое число (любого знака)

    Returns:
        False для n < 2, True для n == 2, иначе True если нет делителя
        в диапазоне [2, isqrt(n)]

    Examples:
        >>> is_prime(7)
        True
        >>> is_prime(9)
        False
        >>> is_prime(-10)
        False
    """
    if n < 2:
        return False
    elif n == 2:
        return True

    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def primes_up_to(limit: int) -> list[int]:
    """Все простые числа <= limit в порядке возрастания."""
    return [n for n in range(2, limit + 1) if is_prime(n)]
