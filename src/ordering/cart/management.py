"""Cart management — deleting a customer's cart."""

from protean import handle
from protean.fields import Identifier

from ordering.cart.cart import Cart
from ordering.cart.engine import get_engine
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class DeleteCart:
    """Discard a customer's cart. Deleting a missing cart is not an error."""

    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(DeleteCart)
    def delete_cart(self, command):
        get_engine().delete_cart(command.customer_id)
