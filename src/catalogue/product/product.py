"""Product aggregate root."""

import math
from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from catalogue.domain import catalogue


def validate_product(name, description, price, quantity, category):
    """Apply the catalogue listing rules, raising ValidationError on the first failure."""
    if name is None or not name.strip():
        raise ValidationError({"name": ["Product name cannot be empty"]})
    if description is None or not description.strip():
        raise ValidationError({"description": ["Product description cannot be empty"]})
    if price is None or not math.isfinite(price) or price <= 0:
        raise ValidationError({"price": ["Product price must be greater than zero"]})
    if quantity is None or quantity <= 0:
        raise ValidationError({"quantity": ["Product quantity must be greater than zero"]})
    if not category:
        raise ValidationError({"category": ["Product category cannot be empty"]})


@catalogue.aggregate
class Product:
    """An item offered for sale, with its list price and stocked quantity.

    ``category`` holds the category name as entered; it is not checked against
    the Category aggregates.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description, price, quantity, category):
        from catalogue.product.events import ProductCreated

        validate_product(name, description, price, quantity, category)

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            quantity=quantity,
            category=category,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                quantity=quantity,
                category=category,
            )
        )
        return product

    def update_details(self, name, description, price, quantity, category):
        from catalogue.product.events import ProductDetailsUpdated

        validate_product(name, description, price, quantity, category)

        self.name = name
        self.description = description
        self.price = price
        self.quantity = quantity
        self.category = category
        self.updated_at = datetime.now()

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=name,
                price=price,
                quantity=quantity,
                category=category,
            )
        )
