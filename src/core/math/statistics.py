"""
Statistics — агрегаты по последовательности целых чисел

Функции:
- largest(seq): максимум линейным проходом
- smallest(seq): минимум линейным проходом
- average(seq): среднее арифметическое (float)
- summarize(seq): все три агрегата разом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая последовательность → EmptyInputError (не падение процесса)
2. smallest(seq) <= x <= largest(seq) для любого x из seq
3. smallest(seq) <= average(seq) <= largest(seq)
"""

from typing import NamedTuple, Sequence


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyInputError(ValueError):
    """Агрегат запрошен у пустой последовательности."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: sequence is empty")


# =============================================================================
# TYPES
# =============================================================================


class SequenceSummary(NamedTuple):
    """Сводка по последовательности."""

    largest: int
    smallest: int
    average: float
    count: int


# =============================================================================
# AGGREGATES
# =============================================================================


def _require_non_empty(nums: Sequence[int], operation: str) -> None:
    if len(nums) == 0:
        raise EmptyInputError(operation)


def largest(nums: Sequence[int]) -> int:
    """
    Наибольший элемент последовательности.

    Первый элемент служит начальным значением, далее строгое сравнение,
    поэтому при равных значениях сохраняется первое встреченное.

    Raises:
        EmptyInputError: Если последовательность пуста

    Examples:
        >>> largest([3, 1, 4, 1, 5, 9, 2, 6])
        9
    """
    _require_non_empty(nums, "largest")

    result = nums[0]
    for num in nums:
        if num > result:
            result = num
    return result


def smallest(nums: Sequence[int]) -> int:
    """
    Наименьший элемент последовательности.

    Raises:
        EmptyInputError: Если последовательность пуста

    Examples:
        >>> smallest([3, 1, 4, 1, 5, 9, 2, 6])
        1
    """
    _require_non_empty(nums, "smallest")

    result = nums[0]
    for num in nums:
        if num < result:
            result = num
    return result


def average(nums: Sequence[int]) -> float:
    """
    Среднее арифметическое: sum / count.

    Сумма целых вычисляется точно, деление выполняется один раз.

    Raises:
        EmptyInputError: Если последовательность пуста

    Examples:
        >>> average([1, 2, 3, 4])
        2.5
    """
    _require_non_empty(nums, "average")

    total = 0
    for num in nums:
        total += num
    return total / len(nums)


def summarize(nums: Sequence[int]) -> SequenceSummary:
    """
    Все агрегаты последовательности.

    Raises:
        EmptyInputError: Если последовательность пуста
    """
    _require_non_empty(nums, "summarize")

    return SequenceSummary(
        largest=largest(nums),
        smallest=smallest(nums),
        average=average(nums),
        count=len(nums),
    )
