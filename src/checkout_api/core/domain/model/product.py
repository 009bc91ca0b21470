from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from checkout_api.core.domain.model.money import Money

_NO_WEIGHT = Decimal("0")


class ProductKind(str, Enum):
    ELECTRONICS = "electronics"  # shippable
    FOOD = "food"  # shippable, expirable
    DIGITAL = "digital"

    @property
    def shippable(self) -> bool:
        return self is not ProductKind.DIGITAL

    @property
    def expirable(self) -> bool:
        return self is ProductKind.FOOD


@dataclass(frozen=True)
class Product:
    """
    Catalog entry. Stock is not held here: the catalog owns it so that every
    cart referencing the same product sees one quantity.
    """

    name: str
    unit_price: Money
    kind: ProductKind
    weight_kg: Decimal = _NO_WEIGHT
    expiration_date: date | None = None

    def __post_init__(self) -> None:
        if self.unit_price.amount < 0:
            raise ValueError(f"unit_price must be >= 0: {self.name}")
        if self.weight_kg < 0:
            raise ValueError(f"weight_kg must be >= 0: {self.name}")
        if not self.kind.shippable and self.weight_kg != 0:
            raise ValueError(f"non-shippable product cannot have weight: {self.name}")
        if self.kind.expirable != (self.expiration_date is not None):
            raise ValueError(
                f"expiration_date must be set iff product is expirable: {self.name}"
            )

    @staticmethod
    def electronics(
        name: str, price: Decimal | int | str, weight_kg: Decimal | float | str
    ) -> "Product":
        return Product(name, Money.of(price), ProductKind.ELECTRONICS, _kg(weight_kg))

    @staticmethod
    def food(
        name: str,
        price: Decimal | int | str,
        expiration_date: date,
        weight_kg: Decimal | float | str,
    ) -> "Product":
        return Product(
            name, Money.of(price), ProductKind.FOOD, _kg(weight_kg), expiration_date
        )

    @staticmethod
    def digital(name: str, price: Decimal | int | str) -> "Product":
        return Product(name, Money.of(price), ProductKind.DIGITAL)

    @property
    def shippable(self) -> bool:
        return self.kind.shippable

    @property
    def expirable(self) -> bool:
        return self.kind.expirable

    def weight(self) -> Decimal:
        if self.kind is ProductKind.DIGITAL:
            return _NO_WEIGHT
        return self.weight_kg

    def is_expired(self, today: date) -> bool:
        if self.kind is ProductKind.FOOD and self.expiration_date is not None:
            return today > self.expiration_date
        return False


def _kg(value: Decimal | float | str) -> Decimal:
    return Decimal(str(value))
