"""
Domain models and value objects.

Contains the bank account with its balance guard, score grading,
and the Writer interface used by the lesson drivers.
"""

from src.core.domain.account import BankAccount, InsufficientFundsError
from src.core.domain.grading import (
    GRADE_BANDS,
    Grade,
    InvalidScoreError,
    grade_for_score,
)
from src.core.domain.writer import (
    ConsoleWriter,
    LineCollector,
    StringWriter,
    Writer,
)

__all__ = [
    # Account
    "BankAccount",
    "InsufficientFundsError",
    # Grading
    "GRADE_BANDS",
    "Grade",
    "InvalidScoreError",
    "grade_for_score",
    # Writer
    "ConsoleWriter",
    "LineCollector",
    "StringWriter",
    "Writer",
]
