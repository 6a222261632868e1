"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands. Amounts and quantities are not range-checked here;
the cart engine owns those rules and reports them as validation errors.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class LineItemSchema(BaseModel):
    line_id: int
    name: str | None = None
    price: float
    quantity: int
    discount: float
    total: float


class InvoiceCustomerSchema(BaseModel):
    customer_id: str
    name: str
    email: str
    address: str | None = None
    contact_number: str | None = None


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class AddLineItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Laptop", "price": 1000.00, "quantity": 1, "discount": 10},
                {"line_id": 1, "name": "Laptop", "price": 1000.00, "quantity": 1, "discount": 0},
            ]
        }
    }

    line_id: int = 0
    name: str | None = None
    price: float
    quantity: int
    discount: float = 0.0


class UpdateDiscountRequest(BaseModel):
    discount: float


class GenerateInvoiceRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"payment_option": "CreditCard"}]}}

    payment_option: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class CartResponse(BaseModel):
    customer_id: str
    items: list[LineItemSchema]


class InvoiceResponse(BaseModel):
    invoice_number: str
    customer: InvoiceCustomerSchema
    items: list[LineItemSchema]
    subtotal: float
    discount: float
    tax: float
    total: float
    payment_option: str
    generated_at: datetime
