from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from checkout_api.adapters.inbound.rendering import render_receipt
from checkout_api.core.domain.model.errors import (
    CheckoutError,
    EmptyCart,
    ExpiredProduct,
    InsufficientFunds,
    InsufficientStock,
    ProductNotFound,
    ValidationError,
)
from checkout_api.core.ports.inbound.checkout import (
    PlaceCheckoutCommand,
    PlaceCheckoutLine,
    PlaceCheckoutUseCase,
    Receipt,
)
from checkout_api.core.ports.outbound.catalog import Catalog

logger = logging.getLogger(__name__)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class CheckoutLineIn(BaseModel):
    product: str = Field(min_length=1, examples=["Cheese"])
    quantity: int = Field(gt=0, examples=[2])


class CheckoutRequest(BaseModel):
    customer_name: str = Field(min_length=1, examples=["John Doe"])
    balance: Decimal = Field(ge=0, examples=["1500.00"])
    lines: list[CheckoutLineIn] = Field(default_factory=list)


class ReceiptLineOut(BaseModel):
    name: str
    quantity: int
    line_total: str


class ShipmentLineOut(BaseModel):
    name: str
    quantity: int
    weight_grams: int


class ReceiptResponse(BaseModel):
    customer_name: str
    currency: str
    lines: list[ReceiptLineOut]
    subtotal: str
    shipping_fee: str
    total: str
    remaining_balance: str
    shipment_lines: list[ShipmentLineOut]
    total_weight_kg: str
    text: str


class ProductOut(BaseModel):
    name: str
    kind: str
    unit_price: str
    currency: str
    stock: int
    weight_kg: str
    expiration_date: str | None


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


def _map_error_to_http(err: CheckoutError) -> tuple[int, ErrorResponse]:
    body = ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, (ValidationError, EmptyCart)):
        return 400, body

    if isinstance(err, InsufficientFunds):
        return 402, body

    if isinstance(err, ProductNotFound):
        return 404, body

    if isinstance(err, (InsufficientStock, ExpiredProduct)):
        return 409, body

    # Fatal and anything unexpected
    return 500, body


def _to_response(receipt: Receipt) -> ReceiptResponse:
    return ReceiptResponse(
        customer_name=receipt.customer_name,
        currency=receipt.total.currency,
        lines=[
            ReceiptLineOut(
                name=ln.name, quantity=ln.quantity, line_total=str(ln.line_total.amount)
            )
            for ln in receipt.lines
        ],
        subtotal=str(receipt.subtotal.amount),
        shipping_fee=str(receipt.shipping_fee.amount),
        total=str(receipt.total.amount),
        remaining_balance=str(receipt.remaining_balance.amount),
        shipment_lines=[
            ShipmentLineOut(
                name=ln.name, quantity=ln.quantity, weight_grams=ln.weight_grams
            )
            for ln in receipt.shipment_lines
        ],
        total_weight_kg=str(receipt.total_weight_kg),
        text=render_receipt(receipt),
    )


def create_app(place_checkout_uc: PlaceCheckoutUseCase, catalog: Catalog) -> FastAPI:
    app = FastAPI(title="checkout_api")

    # --- exception handlers ------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error")
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes --------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/products", response_model=list[ProductOut])
    def list_products() -> Any:
        return [
            ProductOut(
                name=lvl.product.name,
                kind=lvl.product.kind.value,
                unit_price=str(lvl.product.unit_price.amount),
                currency=lvl.product.unit_price.currency,
                stock=lvl.quantity,
                weight_kg=str(lvl.product.weight()),
                expiration_date=(
                    lvl.product.expiration_date.isoformat()
                    if lvl.product.expiration_date
                    else None
                ),
            )
            for lvl in catalog.list_stock()
        ]

    @app.post(
        "/checkout",
        response_model=ReceiptResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            402: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    def checkout(req: CheckoutRequest) -> Any:
        cmd = PlaceCheckoutCommand(
            customer_name=req.customer_name,
            balance=req.balance,
            lines=tuple(
                PlaceCheckoutLine(product=ln.product, quantity=ln.quantity)
                for ln in req.lines
            ),
        )

        result = place_checkout_uc.place_checkout(cmd)

        if isinstance(result, Success):
            return _to_response(result.unwrap())

        status, body = _map_error_to_http(result.failure())
        return JSONResponse(status_code=status, content=body.model_dump())

    return app
