"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True)


@catalogue.event(part_of="Product")
class ProductDetailsUpdated:
    """A product's details, price or stocked quantity were changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True)
