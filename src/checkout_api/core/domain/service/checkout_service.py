from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from checkout_api.core.domain.model.cart import Cart
from checkout_api.core.domain.model.customer import Customer, insufficient_funds
from checkout_api.core.domain.model.errors import CheckoutError, EmptyCart, Fatal
from checkout_api.core.domain.model.money import Money
from checkout_api.core.domain.service.shipping import shipping_fee, to_grams
from checkout_api.core.ports.inbound.checkout import (
    CheckoutUseCase,
    Receipt,
    ReceiptLine,
    ShipmentLine,
)
from checkout_api.core.ports.outbound.catalog import Catalog, Reservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutDeps:
    catalog: Catalog
    today: Callable[[], date] = date.today


@dataclass(frozen=True)
class CheckoutContext:
    customer: Customer
    cart: Cart


@dataclass(frozen=True)
class PricedCheckout:
    customer: Customer
    cart: Cart
    subtotal: Money
    shipping_fee: Money
    total: Money
    total_weight_kg: Decimal


@dataclass(frozen=True)
class CheckoutService(CheckoutUseCase):
    deps: CheckoutDeps

    def new_cart(self) -> Cart:
        return Cart(stock_of=self.deps.catalog.stock_of, today=self.deps.today)

    def checkout(
        self, customer: Customer, cart: Cart
    ) -> Result[Receipt, CheckoutError]:
        result = flow(
            CheckoutContext(customer=customer, cart=cart),
            _ensure_not_empty,
            bind(_price),
            bind(_ensure_funds),
            bind(self._commit),
            map_(_to_receipt),
        )

        if isinstance(result, Success):
            receipt = result.unwrap()
            logger.info(
                "checkout completed: customer=%s total=%s remaining=%s",
                customer.name,
                receipt.total.amount,
                receipt.remaining_balance.amount,
            )
        else:
            err = result.failure()
            if isinstance(err, Fatal):
                logger.error("checkout failed: customer=%s error=%s", customer.name, err)
            else:
                logger.info(
                    "checkout rejected: customer=%s reason=%s: %s",
                    customer.name,
                    type(err).__name__,
                    err,
                )
        return result

    # ---- commit phase ------------------------------------------------------

    def _commit(self, priced: PricedCheckout) -> Result[PricedCheckout, CheckoutError]:
        reservations: Tuple[Reservation, ...] = tuple(
            Reservation(ln.product, ln.quantity) for ln in priced.cart.lines
        )

        # stock first: it is the only step another cart can invalidate
        committed = self.deps.catalog.commit(reservations)
        if isinstance(committed, Failure):
            return committed

        deducted = priced.customer.deduct(priced.total)
        if isinstance(deducted, Failure):
            self.deps.catalog.restock(reservations)
            return Failure(
                Fatal(
                    f"balance deduction failed after funds check: {deducted.failure()}"
                )
            )

        return Success(priced)


# ---- pure helpers ----------------------------------------------------------


def _ensure_not_empty(ctx: CheckoutContext) -> Result[CheckoutContext, CheckoutError]:
    if ctx.cart.is_empty():
        return Failure(EmptyCart("Cart is empty"))
    return Success(ctx)


def _price(ctx: CheckoutContext) -> Result[PricedCheckout, CheckoutError]:
    subtotal = ctx.cart.subtotal()
    weight = ctx.cart.total_weight()
    fee = shipping_fee(weight)
    return Success(
        PricedCheckout(
            customer=ctx.customer,
            cart=ctx.cart,
            subtotal=subtotal,
            shipping_fee=fee,
            total=subtotal + fee,
            total_weight_kg=weight,
        )
    )


def _ensure_funds(priced: PricedCheckout) -> Result[PricedCheckout, CheckoutError]:
    if not priced.customer.can_afford(priced.total):
        return Failure(
            insufficient_funds(required=priced.total, available=priced.customer.balance)
        )
    return Success(priced)


def _to_receipt(priced: PricedCheckout) -> Receipt:
    return Receipt(
        customer_name=priced.customer.name,
        lines=tuple(
            ReceiptLine(ln.product.name, ln.quantity, ln.total_price())
            for ln in priced.cart.lines
        ),
        subtotal=priced.subtotal,
        shipping_fee=priced.shipping_fee,
        total=priced.total,
        remaining_balance=priced.customer.balance,
        shipment_lines=tuple(
            ShipmentLine(ln.product.name, ln.quantity, to_grams(ln.total_weight()))
            for ln in priced.cart.shippable_lines()
        ),
        total_weight_kg=priced.total_weight_kg,
    )
