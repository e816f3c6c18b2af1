"""
Equations — решение линейных и квадратных уравнений a·x² + b·x + c = 0

Классификация:
    a == 0, b != 0          → LINEAR   (x = -c / b)
    a == 0, b == 0, c == 0  → INFINITE (любое x)
    a == 0, b == 0, c != 0  → NONE     (решений нет)
    a != 0:
        disc = b² - 4ac
        disc > 0  → TWO_REAL  (q / a и c / q, q = -(b + sign(b)·√disc) / 2)
        disc == 0 → ONE_REAL  (-b / 2a)
        disc < 0  → NO_REAL

Сравнение дискриминанта с нулём идёт через compare_with_tolerance.
По умолчанию толерантность 0.0, т.е. сравнение точное; её можно
задать через SolverConfig.discriminant_tol.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэффициенты всегда конечные (NaN/Inf → ValidationError)
2. Корни возвращаются по возрастанию, -0.0 нормализуется в 0.0
3. Функция чистая: одинаковый вход → одинаковый результат
4. Корни конечных коэффициентов никогда не NaN: если b² - 4ac
   переполняет float, знак и корни считаются по коэффициентам,
   масштабированным степенью двойки
"""

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.math.numerical_safeguards import (
    compare_with_tolerance,
    is_valid_float,
    validate_finite,
)


# =============================================================================
# ENUMS
# =============================================================================


class SolutionKind(str, Enum):
    """Тип решения уравнения"""

    TWO_REAL = "two_real"
    ONE_REAL = "one_real"
    NO_REAL = "no_real"
    LINEAR = "linear"
    INFINITE = "infinite"
    NONE = "none"


# =============================================================================
# MODELS
# =============================================================================


class QuadraticCoefficients(BaseModel):
    """
    Коэффициенты уравнения a·x² + b·x + c = 0.

    Immutable модель (frozen=True); NaN/Inf отвергаются валидатором.
    """

    a: float = Field(..., description="Коэффициент при x²")
    b: float = Field(..., description="Коэффициент при x")
    c: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}

    @field_validator("a", "b", "c")
    @classmethod
    def validate_finite_coefficient(cls, v: float, info: ValidationInfo) -> float:
        validate_finite(v, info.field_name)
        return v

    @property
    def is_degenerate(self) -> bool:
        """a == 0: уравнение не квадратное."""
        return self.a == 0

    def discriminant(self) -> float:
        """b² - 4ac"""
        return self.b * self.b - 4 * self.a * self.c


@dataclass(frozen=True)
class QuadraticSolution:
    """Результат решения уравнения."""

    kind: SolutionKind
    roots: tuple[float, ...] = ()

    def describe(self) -> str:
        """Человекочитаемое описание результата (2 знака после запятой)."""
        if self.kind is SolutionKind.TWO_REAL:
            return (
                f"Two real and distinct roots: "
                f"{self.roots[0]:.2f} and {self.roots[1]:.2f}"
            )
        if self.kind is SolutionKind.ONE_REAL:
            return f"One real root: {self.roots[0]:.2f}"
        if self.kind is SolutionKind.LINEAR:
            return f"Linear equation root: {self.roots[0]:.2f}"
        if self.kind is SolutionKind.INFINITE:
            return "Infinite solutions"
        if self.kind is SolutionKind.NONE:
            return "No solution"
        return "No real solutions"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация решателя."""

    # Абсолютная толерантность сравнения дискриминанта с нулём
    discriminant_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.discriminant_tol < 0:
            raise ValueError(
                f"discriminant_tol must be non-negative, got {self.discriminant_tol}"
            )


# =============================================================================
# SOLVER
# =============================================================================


def _normalize_root(x: float) -> float:
    # -0.0 + 0.0 == 0.0
    return x + 0.0


def _scaled_coefficients(coeffs: QuadraticCoefficients) -> tuple[float, float, float]:
    """Коэффициенты, делённые на степень двойки порядка max(|a|, |b|, |c|)."""
    _, exponent = math.frexp(max(abs(coeffs.a), abs(coeffs.b), abs(coeffs.c)))
    return (
        math.ldexp(coeffs.a, -exponent),
        math.ldexp(coeffs.b, -exponent),
        math.ldexp(coeffs.c, -exponent),
    )


def discriminant(a: float, b: float, c: float) -> float:
    """
    Дискриминант b² - 4ac.

    Examples:
        >>> discriminant(1, -3, 2)
        1.0
    """
    return QuadraticCoefficients(a=a, b=b, c=c).discriminant()


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    config: SolverConfig | None = None,
) -> QuadraticSolution:
    """
    Классификация и решение уравнения a·x² + b·x + c = 0.

    Args:
        a: Коэффициент при x²
        b: Коэффициент при x
        c: Свободный член
        config: Конфигурация решателя (опционально)

    Returns:
        QuadraticSolution с типом решения и корнями по возрастанию

    Raises:
        pydantic.ValidationError: Если коэффициенты NaN/Inf

    Examples:
        >>> solve_quadratic(1, -3, 2).roots
        (1.0, 2.0)
        >>> solve_quadratic(1, 2, 1).roots
        (-1.0,)
        >>> solve_quadratic(0, 2, -4).kind
        <SolutionKind.LINEAR: 'linear'>
    """
    config = config or SolverConfig()
    coeffs = QuadraticCoefficients(a=a, b=b, c=c)

    # 1. Вырожденный случай: линейное уравнение
    if coeffs.is_degenerate:
        if coeffs.b != 0:
            root = _normalize_root(-coeffs.c / coeffs.b)
            return QuadraticSolution(kind=SolutionKind.LINEAR, roots=(root,))
        if coeffs.c == 0:
            return QuadraticSolution(kind=SolutionKind.INFINITE)
        return QuadraticSolution(kind=SolutionKind.NONE)

    # 2. Квадратное уравнение
    a, b, c = coeffs.a, coeffs.b, coeffs.c
    disc = coeffs.discriminant()
    if is_valid_float(disc):
        sign = compare_with_tolerance(disc, 0.0, tol=config.discriminant_tol)
    else:
        # b² - 4ac вышел за диапазон float (inf или inf - inf = NaN).
        # Масштаб степенью двойки не меняет корни, знак берётся точно.
        a, b, c = _scaled_coefficients(coeffs)
        disc = b * b - 4 * a * c
        sign = compare_with_tolerance(disc, 0.0, tol=0.0)

    if sign > 0:
        # q = -(b + sign(b)·√disc) / 2; x1 = q / a, x2 = c / q
        q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
        root1 = _normalize_root(q / a)
        root2 = _normalize_root(c / q)
        return QuadraticSolution(
            kind=SolutionKind.TWO_REAL,
            roots=tuple(sorted((root1, root2))),
        )

    if sign == 0:
        root = _normalize_root(-b / (2 * a))
        return QuadraticSolution(kind=SolutionKind.ONE_REAL, roots=(root,))

    return QuadraticSolution(kind=SolutionKind.NO_REAL)
