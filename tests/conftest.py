"""Pytest fixtures for checkout_api tests."""

from datetime import date, timedelta

import pytest

from checkout_api.adapters.outbound.in_memory_catalog import InMemoryCatalog
from checkout_api.core.domain.model.customer import Customer
from checkout_api.core.domain.model.money import Money
from checkout_api.core.domain.model.product import Product
from checkout_api.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from checkout_api.core.domain.service.place_checkout_service import (
    PlaceCheckoutDeps,
    PlaceCheckoutService,
)

TODAY = date(2025, 6, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def cheese():
    return Product.food("Cheese", 100, TODAY + timedelta(days=7), "0.2")


@pytest.fixture
def biscuits():
    return Product.food("Biscuits", 150, TODAY + timedelta(days=30), "0.7")


@pytest.fixture
def tv():
    return Product.electronics("TV", 500, "15.0")


@pytest.fixture
def mobile():
    return Product.electronics("Mobile", 800, "0.5")


@pytest.fixture
def scratch_card():
    return Product.digital("Mobile Scratch Card", 50)


@pytest.fixture
def expired_cheese():
    return Product.food("Expired Cheese", 100, TODAY - timedelta(days=1), "0.2")


@pytest.fixture
def catalog(cheese, biscuits, tv, mobile, scratch_card, expired_cheese):
    return InMemoryCatalog.of(
        [
            (cheese, 10),
            (biscuits, 5),
            (tv, 3),
            (mobile, 2),
            (scratch_card, 100),
            (expired_cheese, 5),
        ]
    )


@pytest.fixture
def checkout_service(catalog):
    return CheckoutService(CheckoutDeps(catalog=catalog, today=lambda: TODAY))


@pytest.fixture
def place_checkout_service(catalog, checkout_service):
    return PlaceCheckoutService(
        PlaceCheckoutDeps(catalog=catalog, checkout=checkout_service)
    )


@pytest.fixture
def cart(checkout_service):
    return checkout_service.new_cart()


@pytest.fixture
def customer():
    return Customer("John Doe", Money.of(1500))
