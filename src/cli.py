"""
Command-line entry point for the lecture exercises.

Every exercise is a subcommand. Inputs of the interactive exercises
(control-flow, solve, factorial) are taken from positional arguments,
or from stdin when omitted. Stdin is read line by line until enough
values arrive; more values than an exercise takes are rejected.

Exit codes: 0 on success, 1 on a domain error (printed as "Error: ..."),
2 on bad arguments (argparse).
"""

import argparse
import logging
import os
import sys
from typing import Callable, Sequence, TextIO, TypeVar

from src.core.domain.writer import ConsoleWriter
from src.core.logging_config import setup_logging
from src.core.math.equations import SolverConfig
from src.lessons import (
    run_bank_account,
    run_binary,
    run_control_flow,
    run_equation,
    run_factorial,
    run_maps,
    run_primes,
    run_safe_sqrt,
    run_slices,
    run_stats,
    run_strings,
    run_writers,
)
from src.lessons.lecture3 import (
    DEFAULT_BINARY_INPUTS,
    DEFAULT_PRIME_CANDIDATES,
    DEFAULT_STATS_SAMPLE,
)

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LECTURES_LOG_LEVEL"

T = TypeVar("T")


# Подкоманды с фиксированным числом значений: имя аргумента и число
VALUE_COUNTS = {
    "control-flow": ("values", 2),
    "solve": ("coefficients", 3),
}


def _read_values(
    given: Sequence[T] | None,
    count: int,
    cast: Callable[[str], T],
    stdin: TextIO,
    stdout: TextIO,
    prompt: str,
) -> list[T]:
    """
    Берёт значения из аргументов, а недостающие читает из stdin.

    stdin читается построчно, пока не наберётся count значений или не
    наступит EOF, поэтому интерактивный ввод завершается по Enter.

    Raises:
        ValueError: Если значений меньше или больше count
    """
    values = list(given or [])
    if len(values) > count:
        raise ValueError(f"expected {count} value(s), got {len(values)}")
    if len(values) == count:
        return values

    if stdin.isatty():
        print(prompt, end="", file=stdout, flush=True)

    needed = count - len(values)
    tokens: list[str] = []
    while len(tokens) < needed:
        line = stdin.readline()
        if not line:
            break
        tokens.extend(line.split())

    if len(tokens) != needed:
        raise ValueError(f"expected {count} value(s), got {len(values) + len(tokens)}")

    values.extend(cast(token) for token in tokens)
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lectures",
        description="Run the lecture exercises",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Log level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available exercises")
    subparsers.required = True

    # Lecture 2
    strings_parser = subparsers.add_parser("strings", help="String operations")
    strings_parser.add_argument("--word", default="Developer")
    strings_parser.add_argument("--phrase", default="I love Python")
    strings_parser.add_argument("--sentence", default="Learning Go is fun")

    subparsers.add_parser("slices", help="List operations")
    subparsers.add_parser("maps", help="Dictionary operations")

    control_parser = subparsers.add_parser(
        "control-flow", help="Parity of a number and grade of a score"
    )
    control_parser.add_argument("values", nargs="*", type=int, help="number score")

    solve_parser = subparsers.add_parser("solve", help="Solve a*x^2 + b*x + c = 0")
    solve_parser.add_argument("coefficients", nargs="*", type=float, help="a b c")
    solve_parser.add_argument(
        "--tol",
        type=float,
        default=0.0,
        help="Tolerance for comparing the discriminant with zero",
    )

    factorial_parser = subparsers.add_parser("factorial", help="Factorial of n")
    factorial_parser.add_argument("n", nargs="?", type=int)

    # Lecture 3
    prime_parser = subparsers.add_parser("prime", help="Primality test")
    prime_parser.add_argument("numbers", nargs="*", type=int)

    binary_parser = subparsers.add_parser("binary", help="Binary digits")
    binary_parser.add_argument("numbers", nargs="*", type=int)

    stats_parser = subparsers.add_parser("stats", help="Largest, smallest, average")
    stats_parser.add_argument("numbers", nargs="*", type=int)

    # Lecture 4
    account_parser = subparsers.add_parser("account", help="Bank account demo")
    account_parser.add_argument("--owner", default="ali")
    account_parser.add_argument("--initial", type=float, default=500.0)
    account_parser.add_argument("--deposit", type=float, default=700.0)
    account_parser.add_argument("--withdraw", type=float, default=1700.0)

    subparsers.add_parser("writers", help="Writer implementations")

    sqrt_parser = subparsers.add_parser("sqrt", help="Square root with error return")
    sqrt_parser.add_argument("values", nargs="*", type=float)

    return parser


def _dispatch(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    writer = ConsoleWriter(stdout)
    command = args.command

    if command == "strings":
        run_strings(
            word=args.word, phrase=args.phrase, sentence=args.sentence, writer=writer
        )
    elif command == "slices":
        run_slices(writer=writer)
    elif command == "maps":
        run_maps(writer=writer)
    elif command == "control-flow":
        number, score = _read_values(
            args.values, 2, int, stdin, stdout, "Enter an integer and a score (0-100): "
        )
        run_control_flow(number, score, writer=writer)
    elif command == "solve":
        a, b, c = _read_values(
            args.coefficients, 3, float, stdin, stdout, "Enter coefficients a, b and c: "
        )
        run_equation(a, b, c, config=SolverConfig(discriminant_tol=args.tol), writer=writer)
    elif command == "factorial":
        given = [] if args.n is None else [args.n]
        (n,) = _read_values(
            given, 1, int, stdin, stdout, "Enter a positive integer to calculate its factorial: "
        )
        run_factorial(n, writer=writer)
    elif command == "prime":
        run_primes(args.numbers or DEFAULT_PRIME_CANDIDATES, writer=writer)
    elif command == "binary":
        run_binary(args.numbers or DEFAULT_BINARY_INPUTS, writer=writer)
    elif command == "stats":
        run_stats(args.numbers or DEFAULT_STATS_SAMPLE, writer=writer)
    elif command == "account":
        run_bank_account(
            initial_balance=args.initial,
            deposit=args.deposit,
            withdraw=args.withdraw,
            owner=args.owner,
            writer=writer,
        )
    elif command == "writers":
        run_writers(stream=stdout, writer=writer)
    elif command == "sqrt":
        run_safe_sqrt(args.values or (25.0, -9.0), writer=writer)
    else:
        raise ValueError(f"Unknown command: {command}")


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in VALUE_COUNTS:
        dest, count = VALUE_COUNTS[args.command]
        given = getattr(args, dest)
        if len(given) > count:
            parser.error(
                f"{args.command}: expected at most {count} value(s), got {len(given)}"
            )

    try:
        setup_logging("DEBUG" if args.verbose else args.log_level)
    except ValueError as e:
        parser.error(str(e))

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logger.debug("running command=%s", args.command)

    try:
        _dispatch(args, stdin, stdout)
    except ValueError as e:
        logger.debug("command %s failed: %s", args.command, e)
        print(f"Error: {e}", file=stdout)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
