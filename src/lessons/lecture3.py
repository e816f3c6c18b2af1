"""Лекция 3: простые числа, двоичная запись, статистика."""

from typing import Sequence

from src.core.domain.writer import LineCollector, Writer
from src.core.math.binary_digits import to_binary_digits
from src.core.math.primes import is_prime
from src.core.math.statistics import summarize

DEFAULT_PRIME_CANDIDATES = (5, 4, 7, 1, -10)
DEFAULT_BINARY_INPUTS = (5, 10, 0)
DEFAULT_STATS_SAMPLE = (3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5)


def run_primes(
    numbers: Sequence[int] = DEFAULT_PRIME_CANDIDATES,
    writer: Writer | None = None,
) -> list[str]:
    out = LineCollector(writer)
    for n in numbers:
        out.write(f"Is {n} prime? {is_prime(n)}")
    return out.lines


def run_binary(
    numbers: Sequence[int] = DEFAULT_BINARY_INPUTS,
    writer: Writer | None = None,
) -> list[str]:
    """
    Raises:
        NegativeInputError: Если среди чисел есть отрицательное
    """
    out = LineCollector(writer)
    for n in numbers:
        out.write(f"Binary of {n} is {to_binary_digits(n)}")
    return out.lines


def run_stats(
    numbers: Sequence[int] = DEFAULT_STATS_SAMPLE,
    writer: Writer | None = None,
) -> list[str]:
    """
    Raises:
        EmptyInputError: Если numbers пуст (ничего не записывается)
    """
    summary = summarize(numbers)

    out = LineCollector(writer)
    out.write(f"Largest: {summary.largest}")
    out.write(f"Smallest: {summary.smallest}")
    out.write(f"Average: {summary.average:.2f}")
    return out.lines
