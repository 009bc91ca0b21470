from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CheckoutError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(CheckoutError):
    pass


@dataclass(frozen=True)
class ProductNotFound(CheckoutError):
    product: str


@dataclass(frozen=True)
class InsufficientStock(CheckoutError):
    product: str
    available: int
    requested: int


@dataclass(frozen=True)
class ExpiredProduct(CheckoutError):
    product: str


@dataclass(frozen=True)
class EmptyCart(CheckoutError):
    pass


@dataclass(frozen=True)
class InsufficientFunds(CheckoutError):
    required: Decimal
    available: Decimal


@dataclass(frozen=True)
class Fatal(CheckoutError):
    """State went inconsistent during the commit phase (a bug, not a rejection)."""
