"""Invoice generation — command and handler."""

from protean import handle
from protean.fields import Identifier, String

from ordering.cart.cart import Cart
from ordering.cart.engine import get_engine
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class GenerateInvoice:
    """Price a customer's cart into an invoice settled with ``payment_option``."""

    customer_id = Identifier(required=True)
    payment_option = String(max_length=20)


@ordering.command_handler(part_of=Cart)
class GenerateInvoiceHandler:
    @handle(GenerateInvoice)
    def generate_invoice(self, command):
        return get_engine().generate_invoice(command.customer_id, command.payment_option)
