"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane.doe@example.com",
                    "address": "123 Elm Street, Springfield",
                    "contact_number": "5550123456",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    address: str = Field(..., max_length=255)
    contact_number: str = Field(..., max_length=10)


# --- Response Schemas ---


class CustomerIdResponse(BaseModel):
    customer_id: str


class CustomerResponse(BaseModel):
    customer_id: str
    name: str
    email: str
    address: str
    contact_number: str

    @classmethod
    def from_customer(cls, customer) -> CustomerResponse:
        return cls(
            customer_id=str(customer.id),
            name=customer.name,
            email=customer.email.address,
            address=customer.address,
            contact_number=customer.contact_number.number,
        )
