from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Sequence

from returns.result import Failure, Result, Success

from checkout_api.core.domain.model.errors import (
    CheckoutError,
    ExpiredProduct,
    InsufficientStock,
    ValidationError,
)
from checkout_api.core.domain.model.money import Money, fold_money
from checkout_api.core.domain.model.product import Product
from checkout_api.core.ports.outbound.catalog import StockLookup


@dataclass
class CartLine:
    product: Product
    quantity: int

    def total_price(self) -> Money:
        return self.product.unit_price * self.quantity

    def total_weight(self) -> Decimal:
        return self.product.weight() * self.quantity


@dataclass
class Cart:
    stock_of: StockLookup
    today: Callable[[], date] = date.today
    _lines: Dict[str, CartLine] = field(default_factory=dict)

    @property
    def lines(self) -> Sequence[CartLine]:
        return tuple(self._lines.values())

    def add(self, product: Product, quantity: int) -> Result[CartLine, CheckoutError]:
        if quantity <= 0:
            return Failure(ValidationError(f"quantity must be > 0 for {product.name}"))

        if product.expirable and product.is_expired(self.today()):
            return Failure(
                ExpiredProduct(
                    message=f"Cannot add expired product: {product.name}",
                    product=product.name,
                )
            )

        return self.stock_of(product).bind(
            lambda available: self._put(product, quantity, available)
        )

    def _put(
        self, product: Product, quantity: int, available: int
    ) -> Result[CartLine, CheckoutError]:
        if quantity > available:
            return Failure(
                InsufficientStock(
                    message=(
                        f"Not enough quantity available for {product.name}. "
                        f"Available: {available}, Requested: {quantity}"
                    ),
                    product=product.name,
                    available=available,
                    requested=quantity,
                )
            )

        existing = self._lines.get(product.name)
        if existing is None:
            line = CartLine(product, quantity)
            self._lines[product.name] = line
            return Success(line)

        combined = existing.quantity + quantity
        if combined > available:
            return Failure(
                InsufficientStock(
                    message=f"Total quantity exceeds available stock for {product.name}",
                    product=product.name,
                    available=available,
                    requested=combined,
                )
            )
        existing.quantity = combined
        return Success(existing)

    def quantity_of(self, product: Product) -> int:
        line = self._lines.get(product.name)
        return line.quantity if line is not None else 0

    def is_empty(self) -> bool:
        return not self._lines

    def subtotal(self) -> Money:
        return fold_money(line.total_price() for line in self._lines.values())

    def total_weight(self) -> Decimal:
        return sum(
            (line.total_weight() for line in self.shippable_lines()), Decimal("0")
        )

    def shippable_lines(self) -> Sequence[CartLine]:
        return tuple(ln for ln in self._lines.values() if ln.product.shippable)
