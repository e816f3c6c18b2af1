"""Лекция 2: строки, срезы, словари, ветвления, уравнения, факториал.

Каждый run_* пишет строки результата в Writer и возвращает их списком.
"""

from typing import Sequence

from src.core.domain.grading import InvalidScoreError, grade_for_score
from src.core.domain.writer import LineCollector, Writer
from src.core.math.elementary import factorial, parity
from src.core.math.equations import SolverConfig, solve_quadratic
from src.core.math.numerical_safeguards import NegativeInputError


# =============================================================================
# СТРОКИ
# =============================================================================


def run_strings(
    word: str = "Developer",
    phrase: str = "I love Python",
    sentence: str = "Learning Go is fun",
    old: str = "Python",
    new: str = "Go",
    needle: str = "Go",
    writer: Writer | None = None,
) -> list[str]:
    """Первый/последний символ, верхний регистр, замена, поиск, длины."""
    out = LineCollector(writer)

    if word:
        out.write(f"First character: {word[0]}")
        out.write(f"Last character: {word[-1]}")
    out.write(f"Uppercase: {word.upper()}")

    out.write(f"Updated Phrase: {phrase.replace(old, new, 1)}")

    out.write(f"Contains '{needle}': {needle in sentence}")
    out.write(f"Number of bytes: {len(sentence.encode('utf-8'))}")
    out.write(f"Number of characters: {len(sentence)}")

    return out.lines


# =============================================================================
# СРЕЗЫ (СПИСКИ)
# =============================================================================


def run_slices(
    colors: Sequence[str] = ("red", "green", "blue"),
    numbers: Sequence[int] = (5, 3, 8, 1),
    writer: Writer | None = None,
) -> list[str]:
    """Операции со списками: доступ по краям, вставки, удаление, сортировка."""
    out = LineCollector(writer)
    items = list(colors)

    if items:
        out.write(f"First element: {items[0]}")
        out.write(f"Last element: {items[-1]}")

    items.append("yellow")
    items.insert(0, "black")
    out.write(f"After adding elements: {items}")

    last_color = items.pop()
    out.write(f"Removed last element: {last_color}")
    out.write(f"After removing last element: {items}")

    out.write(f"Contains 'green': {'green' in items}")

    nums = list(numbers)
    if len(nums) > 1:
        del nums[1]
        out.write(f"After removing second item: {nums}")

    nums.insert(2, 25)
    out.write(f"After inserting 25 at index 2: {nums}")

    nums.sort()
    out.write(f"Sorted list: {nums}")

    return out.lines


# =============================================================================
# СЛОВАРИ
# =============================================================================


def run_maps(writer: Writer | None = None) -> list[str]:
    """
    Работа со словарём: чтение, добавление, проверка ключа, слияние, удаление.

    dict сохраняет порядок вставки, поэтому список ключей детерминирован.
    """
    out = LineCollector(writer)

    person: dict[str, object] = {
        "name": "Alice",
        "age": 30,
        "city": "New York",
    }

    out.write(f"Name: {person['name']}")
    person["occupation"] = "Developer"

    out.write("Keys:")
    for key in person:
        out.write(key)

    out.write(f"Contains 'age' key: {'age' in person}")

    hobbies = {"hobbies": ["reading", "coding"]}
    person.update(hobbies)

    del person["city"]
    out.write(f"Final map: {person}")

    return out.lines


# =============================================================================
# ВЕТВЛЕНИЯ
# =============================================================================


def run_control_flow(number: int, score: int, writer: Writer | None = None) -> list[str]:
    """Чётность числа и буквенная оценка по баллу."""
    out = LineCollector(writer)

    out.write(parity(number))

    try:
        out.write(grade_for_score(score).value)
    except InvalidScoreError:
        out.write("Invalid score")

    return out.lines


# =============================================================================
# УРАВНЕНИЕ
# =============================================================================


def run_equation(
    a: float,
    b: float,
    c: float,
    config: SolverConfig | None = None,
    writer: Writer | None = None,
) -> list[str]:
    out = LineCollector(writer)
    out.write(solve_quadratic(a, b, c, config=config).describe())
    return out.lines


# =============================================================================
# ФАКТОРИАЛ
# =============================================================================


def run_factorial(n: int, writer: Writer | None = None) -> list[str]:
    out = LineCollector(writer)
    try:
        out.write(f"Factorial of {n} is {factorial(n)}")
    except NegativeInputError as e:
        out.write(str(e))
    return out.lines
