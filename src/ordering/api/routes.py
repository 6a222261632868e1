"""FastAPI routes for the Ordering domain — carts and invoices."""

from dataclasses import asdict

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddLineItemRequest,
    CartResponse,
    GenerateInvoiceRequest,
    InvoiceResponse,
    LineItemSchema,
    UpdateDiscountRequest,
)
from ordering.cart.engine import get_engine
from ordering.cart.items import AddLineItem, UpdateLineItemDiscount
from ordering.cart.management import DeleteCart
from ordering.invoice.generation import GenerateInvoice

cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("/{customer_id}/items", response_model=LineItemSchema)
async def add_line_item(customer_id: str, body: AddLineItemRequest) -> LineItemSchema:
    command = AddLineItem(
        customer_id=customer_id,
        line_id=body.line_id,
        name=body.name,
        price=body.price,
        quantity=body.quantity,
        discount=body.discount,
    )
    item = current_domain.process(command, asynchronous=False)
    return LineItemSchema(**asdict(item))


@cart_router.put("/{customer_id}/items/{line_id}/discount", response_model=LineItemSchema)
async def update_line_item_discount(customer_id: str, line_id: int, body: UpdateDiscountRequest) -> LineItemSchema:
    command = UpdateLineItemDiscount(
        customer_id=customer_id,
        line_id=line_id,
        discount=body.discount,
    )
    item = current_domain.process(command, asynchronous=False)
    return LineItemSchema(**asdict(item))


@cart_router.get("/{customer_id}", response_model=CartResponse | None)
async def get_cart(customer_id: str) -> CartResponse | None:
    cart = get_engine().get_cart(customer_id)
    if cart is None:
        return None
    return CartResponse(customer_id=cart.customer_id, items=[asdict(item) for item in cart.items])


@cart_router.post("/{customer_id}/invoice", response_model=InvoiceResponse)
async def generate_invoice(customer_id: str, body: GenerateInvoiceRequest) -> InvoiceResponse:
    command = GenerateInvoice(customer_id=customer_id, payment_option=body.payment_option)
    invoice = current_domain.process(command, asynchronous=False)
    return InvoiceResponse(**invoice.to_dict())


@cart_router.delete("/{customer_id}", status_code=204)
async def delete_cart(customer_id: str) -> Response:
    current_domain.process(DeleteCart(customer_id=customer_id), asynchronous=False)
    return Response(status_code=204)
