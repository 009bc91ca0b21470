from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Sequence

from returns.result import Result

from checkout_api.core.domain.model.cart import Cart
from checkout_api.core.domain.model.customer import Customer
from checkout_api.core.domain.model.errors import CheckoutError
from checkout_api.core.domain.model.money import Money


@dataclass(frozen=True)
class ReceiptLine:
    name: str
    quantity: int
    line_total: Money


@dataclass(frozen=True)
class ShipmentLine:
    name: str
    quantity: int
    weight_grams: int


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    lines: Sequence[ReceiptLine]
    subtotal: Money
    shipping_fee: Money
    total: Money
    remaining_balance: Money
    shipment_lines: Sequence[ShipmentLine]
    total_weight_kg: Decimal

    @property
    def has_shipment(self) -> bool:
        return bool(self.shipment_lines)


@dataclass(frozen=True)
class PlaceCheckoutLine:
    product: str
    quantity: int


@dataclass(frozen=True)
class PlaceCheckoutCommand:
    customer_name: str
    balance: Decimal
    lines: Sequence[PlaceCheckoutLine]


class CheckoutUseCase(Protocol):
    def new_cart(self) -> Cart: ...

    def checkout(
        self, customer: Customer, cart: Cart
    ) -> Result[Receipt, CheckoutError]: ...


class PlaceCheckoutUseCase(Protocol):
    def place_checkout(
        self, command: PlaceCheckoutCommand
    ) -> Result[Receipt, CheckoutError]: ...
