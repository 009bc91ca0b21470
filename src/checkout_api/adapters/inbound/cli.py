from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from returns.result import Success

from checkout_api.adapters.inbound.rendering import render_error, render_receipt
from checkout_api.core.ports.inbound.checkout import (
    PlaceCheckoutCommand,
    PlaceCheckoutLine,
    PlaceCheckoutUseCase,
)


def run_cli(usecase: PlaceCheckoutUseCase, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"customer_name":"John Doe","balance":"1500",
       "lines":[{"product":"Cheese","quantity":2},{"product":"Biscuits","quantity":1}]}
    """
    try:
        payload = json.loads(raw)
        cmd = _parse_command(payload)
    except Exception as e:  # noqa: BLE001
        print(f"invalid_input: {e}")
        return 2

    result = usecase.place_checkout(cmd)

    if isinstance(result, Success):
        print(render_receipt(result.unwrap()))
        return 0

    print(render_error(result.failure()))
    return 1


def _parse_command(payload: dict[str, Any]) -> PlaceCheckoutCommand:
    lines = [
        PlaceCheckoutLine(product=str(x["product"]), quantity=int(x["quantity"]))
        for x in payload.get("lines", [])
    ]
    return PlaceCheckoutCommand(
        customer_name=str(payload.get("customer_name", "")),
        balance=Decimal(str(payload.get("balance", "0"))),
        lines=tuple(lines),
    )
