"""Cart line item management — commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, Text

from ordering.cart.cart import Cart
from ordering.cart.engine import get_engine
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class AddLineItem:
    """Add a line to a customer's cart, or add quantity to an existing line.

    Leave ``line_id`` at 0 for a new line; pass a previously returned
    ``line_id`` to merge into that line.
    """

    customer_id = Identifier(required=True)
    line_id = Integer(default=0)
    name = Text()
    price = Float(required=True)
    quantity = Integer(required=True)
    discount = Float(default=0.0)


@ordering.command(part_of="Cart")
class UpdateLineItemDiscount:
    customer_id = Identifier(required=True)
    line_id = Integer(required=True)
    discount = Float(required=True)


@ordering.command_handler(part_of=Cart)
class ManageLineItemsHandler:
    @handle(AddLineItem)
    def add_line_item(self, command):
        return get_engine().add_or_update_line_item(command.customer_id, command)

    @handle(UpdateLineItemDiscount)
    def update_line_item_discount(self, command):
        return get_engine().update_line_item_discount(
            command.customer_id,
            command.line_id,
            command.discount,
        )
