from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

CURRENCY = "EGP"
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = CURRENCY

    @staticmethod
    def of(amount: Decimal | int | str, currency: str = CURRENCY) -> "Money":
        dec = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return Money(dec, currency)

    @staticmethod
    def zero(currency: str = CURRENCY) -> "Money":
        return Money.of(0, currency=currency)

    def __add__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, n: int | Decimal) -> "Money":
        return Money(
            (self.amount * Decimal(n)).quantize(_CENTS, rounding=ROUND_HALF_UP),
            self.currency,
        )

    def __lt__(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def truncated(self) -> int:
        """Integer display value; truncates toward zero, never rounds."""
        return int(self.amount)

    def _assert_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"currency_mismatch: {self.currency} vs {other.currency}")


def fold_money(values: Iterable[Money], currency: str = CURRENCY) -> Money:
    total = Money.zero(currency=currency)
    for v in values:
        total = total + v
    return total
