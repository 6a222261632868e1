"""Cart aggregate — one per customer, holding the line items pending purchase.

Carts are not persisted through a repository. The CartStore keeps them in a
plain mapping keyed by customer identifier, and callers only ever receive
frozen snapshots of their contents.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, Text

from ordering.domain import ordering


@dataclass(frozen=True)
class LineItemSnapshot:
    """Detached, read-only copy of a line item."""

    line_id: int
    name: str | None
    price: float
    quantity: int
    discount: float
    total: float


@dataclass(frozen=True)
class CartSnapshot:
    """Detached, read-only copy of a cart, items in insertion order."""

    customer_id: str
    items: tuple[LineItemSnapshot, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items


def line_total(price, quantity, discount):
    return price * quantity - discount


@ordering.entity(part_of="Cart")
class LineItem:
    line_id = Integer(identifier=True)
    name = Text()
    price = Float(required=True)
    quantity = Integer(required=True)
    discount = Float(default=0.0)
    total = Float(required=True)

    def recompute_total(self):
        self.total = line_total(self.price, self.quantity, self.discount)

    def snapshot(self) -> LineItemSnapshot:
        return LineItemSnapshot(
            line_id=self.line_id,
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            discount=self.discount,
            total=self.total,
        )


@ordering.aggregate
class Cart:
    customer_id = Identifier(identifier=True)
    items = HasMany(LineItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def find_item(self, line_id):
        """Return the line item carrying ``line_id``, or None. Zero/None never matches."""
        if not line_id:
            return None
        return next((item for item in self.items if item.line_id == line_id), None)

    def append_item(self, line_id, name, price, quantity, discount):
        item = LineItem(
            line_id=line_id,
            name=name,
            price=price,
            quantity=quantity,
            discount=discount,
            total=line_total(price, quantity, discount),
        )
        self.add_items(item)
        self.updated_at = datetime.now(UTC)
        return item

    def increase_quantity(self, item, quantity):
        """Merge an added quantity into an existing line.

        The stored discount is kept as is; only update_discount changes it.
        """
        item.quantity += quantity
        item.recompute_total()
        self.updated_at = datetime.now(UTC)
        return item

    def update_discount(self, item, discount):
        item.discount = discount
        item.recompute_total()
        self.updated_at = datetime.now(UTC)
        return item

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            customer_id=str(self.customer_id),
            items=tuple(item.snapshot() for item in self.items),
        )
