from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from checkout_api.adapters.outbound.in_memory_catalog import InMemoryCatalog
from checkout_api.core.domain.model.product import Product
from checkout_api.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from checkout_api.core.domain.service.place_checkout_service import (
    PlaceCheckoutDeps,
    PlaceCheckoutService,
)


@dataclass(frozen=True)
class UseCases:
    catalog: InMemoryCatalog
    checkout: CheckoutService
    place_checkout: PlaceCheckoutService


def build_catalog(today: date) -> InMemoryCatalog:
    return InMemoryCatalog.of(
        [
            (Product.food("Cheese", 100, today + timedelta(days=7), "0.2"), 10),
            (Product.food("Biscuits", 150, today + timedelta(days=30), "0.7"), 5),
            (Product.electronics("TV", 500, "15.0"), 3),
            (Product.electronics("Mobile", 800, "0.5"), 2),
            (Product.digital("Mobile Scratch Card", 50), 100),
        ]
    )


def build_usecases(today: Callable[[], date] = date.today) -> UseCases:
    catalog = build_catalog(today())
    checkout = CheckoutService(CheckoutDeps(catalog=catalog, today=today))
    place_checkout = PlaceCheckoutService(
        PlaceCheckoutDeps(catalog=catalog, checkout=checkout)
    )
    return UseCases(catalog=catalog, checkout=checkout, place_checkout=place_checkout)


def build_place_checkout() -> PlaceCheckoutService:
    # CLI 用（単体）。HTTP 用は build_usecases() を使う
    return build_usecases().place_checkout
