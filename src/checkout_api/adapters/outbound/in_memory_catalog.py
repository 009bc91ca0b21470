from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence

from returns.result import Failure, Result, Success

from checkout_api.core.domain.model.errors import (
    CheckoutError,
    InsufficientStock,
    ProductNotFound,
)
from checkout_api.core.domain.model.product import Product
from checkout_api.core.ports.outbound.catalog import Catalog, Reservation, StockLevel

logger = logging.getLogger(__name__)


@dataclass
class InMemoryCatalog(Catalog):
    _products: Dict[str, Product] = field(default_factory=dict)
    _stock_by_name: Dict[str, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def of(cls, stock: Iterable[tuple[Product, int]]) -> "InMemoryCatalog":
        catalog = cls()
        for product, quantity in stock:
            catalog.register(product, quantity)
        return catalog

    def register(self, product: Product, quantity: int) -> None:
        if quantity < 0:
            raise ValueError(f"stock must be >= 0: {product.name}")
        with self._lock:
            if product.name in self._products:
                raise ValueError(f"product already registered: {product.name}")
            self._products[product.name] = product
            self._stock_by_name[product.name] = quantity

    def find(self, name: str) -> Result[Product, CheckoutError]:
        product = self._products.get(name)
        if product is None:
            return Failure(
                ProductNotFound(message=f"Unknown product: {name}", product=name)
            )
        return Success(product)

    def stock_of(self, product: Product) -> Result[int, CheckoutError]:
        with self._lock:
            if product.name not in self._stock_by_name:
                return Failure(
                    ProductNotFound(
                        message=f"Unknown product: {product.name}", product=product.name
                    )
                )
            return Success(self._stock_by_name[product.name])

    def reduce_stock(
        self, product: Product, quantity: int
    ) -> Result[None, CheckoutError]:
        return self.commit((Reservation(product, quantity),))

    def commit(
        self, reservations: Sequence[Reservation]
    ) -> Result[None, CheckoutError]:
        with self._lock:
            # validate first (no partial decrement)
            for r in reservations:
                name = r.product.name
                if name not in self._stock_by_name:
                    return Failure(
                        ProductNotFound(message=f"Unknown product: {name}", product=name)
                    )
                available = self._stock_by_name[name]
                if r.quantity > available:
                    return Failure(
                        InsufficientStock(
                            message=(
                                f"Not enough quantity available for {name}. "
                                f"Available: {available}, Requested: {r.quantity}"
                            ),
                            product=name,
                            available=available,
                            requested=r.quantity,
                        )
                    )

            for r in reservations:
                self._stock_by_name[r.product.name] -= r.quantity

        logger.debug(
            "stock committed: %s",
            ", ".join(f"{r.product.name}-{r.quantity}" for r in reservations),
        )
        return Success(None)

    def restock(self, reservations: Sequence[Reservation]) -> None:
        with self._lock:
            for r in reservations:
                self._stock_by_name[r.product.name] += r.quantity
        logger.warning(
            "stock restored: %s",
            ", ".join(f"{r.product.name}+{r.quantity}" for r in reservations),
        )

    def list_stock(self) -> Sequence[StockLevel]:
        with self._lock:
            return tuple(
                StockLevel(product, self._stock_by_name[name])
                for name, product in self._products.items()
            )
