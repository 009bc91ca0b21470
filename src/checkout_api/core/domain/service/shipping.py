from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from checkout_api.core.domain.model.money import Money

BASE_SHIPPING_FEE = Money.of(20)
SHIPPING_RATE_PER_KG = Money.of(10)

_GRAMS_PER_KG = Decimal(1000)


def shipping_fee(total_weight_kg: Decimal) -> Money:
    # digital-only carts ship free
    if total_weight_kg == 0:
        return Money.zero()
    return BASE_SHIPPING_FEE + SHIPPING_RATE_PER_KG * total_weight_kg


def to_grams(weight_kg: Decimal) -> int:
    return int((weight_kg * _GRAMS_PER_KG).quantize(Decimal(1), rounding=ROUND_HALF_UP))
