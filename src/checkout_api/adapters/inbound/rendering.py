from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from checkout_api.core.domain.model.errors import CheckoutError
from checkout_api.core.ports.inbound.checkout import Receipt

_ONE_DECIMAL = Decimal("0.1")


def render_shipment_notice(receipt: Receipt) -> list[str]:
    if not receipt.has_shipment:
        return []
    out = ["** Shipment notice **"]
    out += [f"{ln.quantity}x {ln.name} {ln.weight_grams}g" for ln in receipt.shipment_lines]
    kg = receipt.total_weight_kg.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    out.append(f"Total package weight {kg}kg")
    out.append("")
    return out


def render_checkout_receipt(receipt: Receipt) -> list[str]:
    out = ["** Checkout receipt **"]
    out += [
        f"{ln.quantity}x {ln.name} {ln.line_total.truncated()}" for ln in receipt.lines
    ]
    out += ["", "---", ""]
    out.append(f"Subtotal {receipt.subtotal.truncated()}")
    if not receipt.shipping_fee.is_zero():
        out.append(f"Shipping {receipt.shipping_fee.truncated()}")
    out.append(f"Amount {receipt.total.truncated()}")
    out.append(
        f"Customer balance after payment: {receipt.remaining_balance.truncated()}"
    )
    out += ["", "END."]
    return out


def render_receipt(receipt: Receipt) -> str:
    return "\n".join(render_shipment_notice(receipt) + render_checkout_receipt(receipt))


def render_error(err: CheckoutError) -> str:
    return f"ERROR: {err}"
