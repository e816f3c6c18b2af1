"""
Core math modules для упражнений

Чистые числовые функции: агрегаты, простота, двоичная запись,
решение уравнений, элементарные функции с валидацией входа.
"""

# Numerical Safeguards
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

# Statistics
from src.core.math.statistics import (
    EmptyInputError,
    SequenceSummary,
    average,
    largest,
    smallest,
    summarize,
)

# Primes
from src.core.math.primes import is_prime, primes_up_to

# Binary digits
from src.core.math.binary_digits import binary_digits_as_int, to_binary_digits

# Equations
from src.core.math.equations import (
    QuadraticCoefficients,
    QuadraticSolution,
    SolutionKind,
    SolverConfig,
    discriminant,
    solve_quadratic,
)

# Elementary
from src.core.math.elementary import factorial, is_even, parity, safe_sqrt

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Exceptions
    "NegativeInputError",
    # Numerical Safeguards — Functions
    "compare_with_tolerance",
    "is_close",
    "is_valid_float",
    "is_zero",
    "validate_finite",
    "validate_non_negative",
    # Statistics
    "EmptyInputError",
    "SequenceSummary",
    "average",
    "largest",
    "smallest",
    "summarize",
    # Primes
    "is_prime",
    "primes_up_to",
    # Binary digits
    "binary_digits_as_int",
    "to_binary_digits",
    # Equations
    "QuadraticCoefficients",
    "QuadraticSolution",
    "SolutionKind",
    "SolverConfig",
    "discriminant",
    "solve_quadratic",
    # Elementary
    "factorial",
    "is_even",
    "parity",
    "safe_sqrt",
]
