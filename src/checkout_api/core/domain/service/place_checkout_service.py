from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, Result, Success

from checkout_api.core.domain.model.customer import Customer
from checkout_api.core.domain.model.errors import CheckoutError, ValidationError
from checkout_api.core.domain.model.money import Money
from checkout_api.core.domain.service.checkout_service import CheckoutContext
from checkout_api.core.ports.inbound.checkout import (
    CheckoutUseCase,
    PlaceCheckoutCommand,
    PlaceCheckoutUseCase,
    Receipt,
)
from checkout_api.core.ports.outbound.catalog import Catalog

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PlaceCheckoutDeps:
    catalog: Catalog
    checkout: CheckoutUseCase


@dataclass(frozen=True)
class PlaceCheckoutService(PlaceCheckoutUseCase):
    deps: PlaceCheckoutDeps

    def place_checkout(
        self, command: PlaceCheckoutCommand
    ) -> Result[Receipt, CheckoutError]:
        return flow(
            command,
            _validate_command,
            bind(self._build_context),
            bind(lambda ctx: self.deps.checkout.checkout(ctx.customer, ctx.cart)),
        )

    def _build_context(
        self, cmd: PlaceCheckoutCommand
    ) -> Result[CheckoutContext, CheckoutError]:
        cart = self.deps.checkout.new_cart()
        for ln in cmd.lines:
            added = self.deps.catalog.find(ln.product.strip()).bind(
                lambda product: cart.add(product, ln.quantity)
            )
            if isinstance(added, Failure):
                return added

        customer = Customer(name=cmd.customer_name.strip(), balance=Money.of(cmd.balance))
        return Success(CheckoutContext(customer=customer, cart=cart))


def _validate_command(
    cmd: PlaceCheckoutCommand,
) -> Result[PlaceCheckoutCommand, CheckoutError]:
    if not cmd.customer_name.strip():
        return Failure(ValidationError("customer_name is required"))
    try:
        balance = Decimal(str(cmd.balance))
    except InvalidOperation:
        return Failure(ValidationError("balance must be a number"))
    if not balance.is_finite() or balance < 0:
        return Failure(ValidationError("balance must be >= 0"))
    # Money keeps cents; a finer balance would be rounded before the funds check
    try:
        in_cents = balance.quantize(_CENTS)
    except InvalidOperation:
        return Failure(ValidationError("balance is out of range"))
    if in_cents != balance:
        return Failure(ValidationError("balance must have at most 2 decimal places"))

    # an empty line list is left for checkout to reject as an empty cart
    for i, ln in enumerate(cmd.lines):
        if not ln.product.strip():
            return Failure(ValidationError(f"lines[{i}].product is required"))
        if ln.quantity <= 0:
            return Failure(ValidationError(f"lines[{i}].quantity must be > 0"))

    return Success(cmd)
