"""Лекция 4: структура с методами, интерфейс Writer, возврат ошибок.

Бизнес-ошибки (недостаточно средств, отрицательный корень) печатаются
строкой результата, выполнение продолжается.
"""

from typing import Sequence, TextIO

from src.core.domain.account import BankAccount, InsufficientFundsError
from src.core.domain.writer import ConsoleWriter, LineCollector, StringWriter, Writer
from src.core.math.elementary import safe_sqrt
from src.core.math.numerical_safeguards import (
    NegativeInputError,
    validate_non_negative,
)


def run_bank_account(
    initial_balance: float = 500.0,
    deposit: float = 700.0,
    withdraw: float = 1700.0,
    owner: str = "ali",
    writer: Writer | None = None,
) -> list[str]:
    """Пополнение, затем попытка снятия сверх баланса."""
    out = LineCollector(writer)

    # Некорректные суммы отвергаются до первой строки вывода
    validate_non_negative(deposit, "amount")
    validate_non_negative(withdraw, "amount")

    account = BankAccount(owner=owner, balance=initial_balance)
    out.write(f"Your starting balance is {account.balance:.2f}")

    account.deposit(deposit)
    out.write(f"Balance now is {account.balance:.2f}")

    try:
        account.withdraw(withdraw)
    except InsufficientFundsError as e:
        out.write(f"Not enough funds to withdraw: {e}")
    else:
        out.write(f"Balance now is {account.balance:.2f}")

    return out.lines


def run_writers(
    console_message: str = "Hello from ConsoleWriter!",
    parts: Sequence[str] = ("Hello, ", "Python Writer!"),
    stream: TextIO | None = None,
    writer: Writer | None = None,
) -> list[str]:
    """
    Две реализации Writer: консольная и строковая.

    ConsoleWriter печатает console_message прямо в stream (stdout по
    умолчанию); в возвращаемые строки попадают только отчёты о записи.
    """
    out = LineCollector(writer)

    cw = ConsoleWriter(stream)
    out.write(f"Characters written: {cw.write(console_message)}")

    sw = StringWriter()
    for part in parts:
        out.write(f"Characters written: {sw.write(part)}")

    out.write(f"StringWriter content: {sw.content}")
    return out.lines


def run_safe_sqrt(
    values: Sequence[float] = (25.0, -9.0),
    writer: Writer | None = None,
) -> list[str]:
    out = LineCollector(writer)
    for value in values:
        try:
            out.write(f"Result: {safe_sqrt(value)}")
        except NegativeInputError as e:
            out.write(f"Error: {e}")
    return out.lines
