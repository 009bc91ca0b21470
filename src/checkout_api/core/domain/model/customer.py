from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from checkout_api.core.domain.model.errors import CheckoutError, InsufficientFunds
from checkout_api.core.domain.model.money import Money


@dataclass
class Customer:
    name: str
    balance: Money

    def __post_init__(self) -> None:
        if self.balance.amount < 0:
            raise ValueError(f"balance must be >= 0: {self.name}")

    def can_afford(self, amount: Money) -> bool:
        return not self.balance < amount

    def deduct(self, amount: Money) -> Result[None, CheckoutError]:
        if amount > self.balance:
            return Failure(insufficient_funds(required=amount, available=self.balance))
        self.balance = self.balance - amount
        return Success(None)


def insufficient_funds(required: Money, available: Money) -> InsufficientFunds:
    return InsufficientFunds(
        message=(
            f"Insufficient balance. Required: {required.amount}, "
            f"Available: {available.amount}"
        ),
        required=required.amount,
        available=available.amount,
    )
