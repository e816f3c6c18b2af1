"""
BankAccount — счёт с защитой баланса

Mutable Pydantic модель (validate_assignment=True): любое присваивание
balance проходит проверку balance >= 0.

Операции:
- deposit(amount): balance += amount
- withdraw(amount): balance -= amount, только если amount <= balance

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. balance >= 0 после любой успешной операции
2. Неуспешная операция не меняет balance
3. Отрицательные и NaN/Inf суммы отвергаются до изменения состояния
"""

import logging

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import validate_finite, validate_non_negative

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InsufficientFundsError(ValueError):
    """Снятие суммы, превышающей баланс."""

    def __init__(self, requested: float, available: float):
        self.requested = requested
        self.available = available
        super().__init__(
            f"insufficient funds: requested {requested:.2f}, available {available:.2f}"
        )


# =============================================================================
# ACCOUNT MODEL
# =============================================================================


class BankAccount(BaseModel):
    """
    Счёт с единственным владельцем.

    Не потокобезопасен и не персистентен: живёт в пределах процесса.
    """

    owner: str = Field("", description="Владелец счёта (для сообщений)")
    balance: float = Field(0.0, ge=0, description="Текущий баланс")

    model_config = {"validate_assignment": True}

    @field_validator("balance")
    @classmethod
    def validate_balance_finite(cls, v: float) -> float:
        validate_finite(v, "balance")
        return v

    def deposit(self, amount: float) -> float:
        """
        Пополнение счёта.

        Args:
            amount: Сумма пополнения (>= 0)

        Returns:
            Новый баланс

        Raises:
            NegativeInputError: Если amount < 0
            ValueError: Если amount NaN/Inf
        """
        validate_non_negative(amount, "amount")

        self.balance = self.balance + amount
        logger.info(
            "deposit owner=%s amount=%.2f balance=%.2f", self.owner, amount, self.balance
        )
        return self.balance

    def withdraw(self, amount: float) -> float:
        """
        Снятие со счёта.

        Args:
            amount: Сумма снятия (>= 0)

        Returns:
            Новый баланс

        Raises:
            InsufficientFundsError: Если amount > balance (баланс не меняется)
            NegativeInputError: Если amount < 0
            ValueError: Если amount NaN/Inf
        """
        validate_non_negative(amount, "amount")

        if amount > self.balance:
            logger.warning(
                "withdraw refused owner=%s amount=%.2f balance=%.2f",
                self.owner,
                amount,
                self.balance,
            )
            raise InsufficientFundsError(requested=amount, available=self.balance)

        self.balance = self.balance - amount
        logger.info(
            "withdraw owner=%s amount=%.2f balance=%.2f", self.owner, amount, self.balance
        )
        return self.balance
