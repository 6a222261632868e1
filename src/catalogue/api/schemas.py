"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Schemas ---


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop",
                    "description": "14 inch ultrabook, 16GB RAM",
                    "price": 1000.00,
                    "quantity": 5,
                    "category": "Electronics",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str
    price: float
    quantity: int
    category: str = Field(..., max_length=100)


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str
    price: float
    quantity: int
    category: str

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            category=product.category,
        )


# --- Category Schemas ---


class CategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Electronics", "description": "Computers, phones and accessories"}]
        }
    }

    name: str = Field(..., max_length=100)
    description: str


class CategoryIdResponse(BaseModel):
    category_id: str


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            category_id=str(category.id),
            name=category.name,
            description=category.description,
        )
