"""Tests for Cart."""

from decimal import Decimal

from returns.result import Failure, Success

from checkout_api.core.domain.model.errors import (
    ExpiredProduct,
    InsufficientStock,
    ProductNotFound,
    ValidationError,
)
from checkout_api.core.domain.model.money import Money
from checkout_api.core.domain.model.product import Product


class TestCartAdd:
    def test_add_new_line(self, cart, cheese):
        result = cart.add(cheese, 2)

        assert isinstance(result, Success)
        line = result.unwrap()
        assert line.product is cheese
        assert line.quantity == 2
        assert line.total_price() == Money.of(200)
        assert line.total_weight() == Decimal("0.4")

    def test_add_same_product_merges_lines(self, cart, cheese):
        cart.add(cheese, 2)
        cart.add(cheese, 3)

        assert len(cart.lines) == 1
        assert cart.quantity_of(cheese) == 5

    def test_split_adds_match_single_add(self, checkout_service, cheese):
        split = checkout_service.new_cart()
        split.add(cheese, 4)
        split.add(cheese, 3)
        single = checkout_service.new_cart()
        single.add(cheese, 7)

        assert split.lines == single.lines

    def test_quantity_above_stock_fails(self, cart, tv):
        # scenario D: stock 3, request 5
        result = cart.add(tv, 5)

        assert isinstance(result, Failure)
        err = result.failure()
        assert isinstance(err, InsufficientStock)
        assert err.available == 3
        assert err.requested == 5
        assert str(err) == "Not enough quantity available for TV. Available: 3, Requested: 5"
        assert cart.is_empty()

    def test_cumulative_quantity_above_stock_fails(self, cart, tv):
        # scenario F
        assert isinstance(cart.add(tv, 2), Success)

        result = cart.add(tv, 2)

        assert isinstance(result, Failure)
        err = result.failure()
        assert isinstance(err, InsufficientStock)
        assert str(err) == "Total quantity exceeds available stock for TV"
        assert cart.quantity_of(tv) == 2

    def test_split_adds_fail_like_single_add(self, checkout_service, tv):
        split = checkout_service.new_cart()
        split.add(tv, 2)
        single = checkout_service.new_cart()

        assert isinstance(split.add(tv, 2).failure(), InsufficientStock)
        assert isinstance(single.add(tv, 4).failure(), InsufficientStock)

    def test_expired_product_fails(self, cart, expired_cheese):
        # scenario E
        result = cart.add(expired_cheese, 1)

        assert isinstance(result, Failure)
        err = result.failure()
        assert isinstance(err, ExpiredProduct)
        assert str(err) == "Cannot add expired product: Expired Cheese"
        assert cart.is_empty()

    def test_non_positive_quantity_fails(self, cart, cheese):
        assert isinstance(cart.add(cheese, 0).failure(), ValidationError)
        assert isinstance(cart.add(cheese, -1).failure(), ValidationError)
        assert cart.is_empty()

    def test_product_outside_catalog_fails(self, cart):
        stray = Product.digital("Stray", 1)

        assert isinstance(cart.add(stray, 1).failure(), ProductNotFound)

    def test_add_does_not_touch_stock(self, cart, catalog, tv):
        cart.add(tv, 3)

        assert catalog.stock_of(tv) == Success(3)


class TestCartTotals:
    def test_empty_cart(self, cart):
        assert cart.is_empty()
        assert cart.subtotal().is_zero()
        assert cart.total_weight() == 0
        assert cart.shippable_lines() == ()

    def test_mixed_cart_totals(self, cart, cheese, biscuits, scratch_card):
        cart.add(cheese, 2)
        cart.add(biscuits, 1)
        cart.add(scratch_card, 1)

        assert cart.subtotal() == Money.of(400)
        assert cart.total_weight() == Decimal("1.1")

    def test_shippable_lines_keep_insertion_order(
        self, cart, cheese, biscuits, scratch_card, tv
    ):
        cart.add(biscuits, 1)
        cart.add(scratch_card, 1)
        cart.add(cheese, 1)
        cart.add(tv, 1)

        names = [ln.product.name for ln in cart.shippable_lines()]
        assert names == ["Biscuits", "Cheese", "TV"]
        assert [ln.product.name for ln in cart.lines] == [
            "Biscuits",
            "Mobile Scratch Card",
            "Cheese",
            "TV",
        ]

    def test_digital_only_cart_has_zero_weight(self, cart, scratch_card):
        cart.add(scratch_card, 3)

        assert cart.total_weight() == 0
        assert cart.shippable_lines() == ()
