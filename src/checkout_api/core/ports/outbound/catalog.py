from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from returns.result import Result

from checkout_api.core.domain.model.errors import CheckoutError
from checkout_api.core.domain.model.product import Product


@dataclass(frozen=True)
class Reservation:
    product: Product
    quantity: int


@dataclass(frozen=True)
class StockLevel:
    product: Product
    quantity: int


StockLookup = Callable[[Product], Result[int, CheckoutError]]


class Catalog(Protocol):
    """
    Single owner of stock. Carts only read through `stock_of`; the only
    writers are `reduce_stock`, `commit` and `restock`.
    """

    def find(self, name: str) -> Result[Product, CheckoutError]: ...

    def stock_of(self, product: Product) -> Result[int, CheckoutError]: ...

    def reduce_stock(
        self, product: Product, quantity: int
    ) -> Result[None, CheckoutError]: ...

    def commit(
        self, reservations: Sequence[Reservation]
    ) -> Result[None, CheckoutError]:
        """Re-check every reservation, then decrement all of them or none."""
        ...

    def restock(self, reservations: Sequence[Reservation]) -> None: ...

    def list_stock(self) -> Sequence[StockLevel]: ...
