"""
Lesson drivers.

One module per lecture; every run_* function writes its result lines to a
Writer and returns them.
"""

from src.lessons.lecture2 import (
    run_control_flow,
    run_equation,
    run_factorial,
    run_maps,
    run_slices,
    run_strings,
)
from src.lessons.lecture3 import run_binary, run_primes, run_stats
from src.lessons.lecture4 import run_bank_account, run_safe_sqrt, run_writers

__all__ = [
    # Lecture 2
    "run_strings",
    "run_slices",
    "run_maps",
    "run_control_flow",
    "run_equation",
    "run_factorial",
    # Lecture 3
    "run_primes",
    "run_binary",
    "run_stats",
    # Lecture 4
    "run_bank_account",
    "run_writers",
    "run_safe_sqrt",
]
