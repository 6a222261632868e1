"""CartEngine — line item merging, cart lifecycle and invoice generation.

Every operation either applies its whole effect or none of it: input is
validated before the store is touched, and mutations run under the store lock.
"""

import math
from dataclasses import dataclass

import structlog
from protean.exceptions import InvalidStateError, ValidationError

from ordering.cart.cart import CartSnapshot, LineItemSnapshot
from ordering.cart.store import CartStore
from ordering.customers import CustomerDirectory, get_directory
from ordering.invoice.invoice import Invoice, PaymentOption

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LineItemDraft:
    """Line item fields as submitted by a caller.

    ``line_id`` of 0 or None asks for a new line; an identifier returned by an
    earlier call asks to add ``quantity`` to that line.
    """

    name: str | None
    price: float
    quantity: int
    discount: float = 0.0
    line_id: int | None = 0


def _is_amount(value) -> bool:
    """True for a finite, non-negative number (rejects NaN and infinities)."""
    return value is not None and math.isfinite(value) and value >= 0


def validate_line_item(candidate) -> None:
    if candidate is None:
        raise ValidationError({"item": ["Cart item is empty"]})
    if not _is_amount(candidate.price):
        raise ValidationError({"price": ["Price must be non-negative"]})
    if candidate.quantity is None or candidate.quantity <= 0:
        raise ValidationError({"quantity": ["Quantity must be greater than zero"]})
    if candidate.discount is not None and not _is_amount(candidate.discount):
        raise ValidationError({"discount": ["Discount must be non-negative"]})


def validate_payment_option(payment_option) -> None:
    if payment_option is None or not str(payment_option).strip():
        raise ValidationError({"payment_option": ["Payment option cannot be null or empty."]})
    if payment_option not in PaymentOption.values():
        raise ValidationError({"payment_option": ["Invalid payment option."]})


class CartEngine:
    def __init__(self, store: CartStore | None = None, directory: CustomerDirectory | None = None) -> None:
        self.store = store if store is not None else CartStore()
        self._directory = directory

    @property
    def directory(self) -> CustomerDirectory:
        return self._directory if self._directory is not None else get_directory()

    def add_or_update_line_item(self, customer_id, candidate) -> LineItemSnapshot:
        """Add ``candidate`` to the customer's cart, creating the cart if needed.

        A candidate whose ``line_id`` matches a line already in this cart is
        merged into it: the quantities are summed and the stored discount is
        kept, whatever discount the candidate carries. Anything else becomes a
        new line with the next identifier from the store.
        """
        validate_line_item(candidate)
        discount = candidate.discount or 0.0

        with self.store.lock:
            cart = self.store.get_or_create(customer_id)
            existing = cart.find_item(candidate.line_id)

            if existing is not None:
                cart.increase_quantity(existing, candidate.quantity)
                logger.info(
                    "line_item_merged",
                    customer_id=str(customer_id),
                    line_id=existing.line_id,
                    quantity=existing.quantity,
                )
                return existing.snapshot()

            item = cart.append_item(
                line_id=self.store.next_line_id(),
                name=candidate.name,
                price=candidate.price,
                quantity=candidate.quantity,
                discount=discount,
            )
            logger.info(
                "line_item_added",
                customer_id=str(customer_id),
                line_id=item.line_id,
                quantity=item.quantity,
            )
            return item.snapshot()

    def update_line_item_discount(self, customer_id, line_id, discount) -> LineItemSnapshot:
        """Replace the discount on an existing line and recompute its total."""
        if not _is_amount(discount):
            raise ValidationError({"discount": ["Discount must be non-negative"]})

        with self.store.lock:
            cart = self.store.get(customer_id)
            item = cart.find_item(line_id) if cart is not None else None
            if item is None:
                raise ValidationError({"line_id": ["Line item not found in cart"]})

            cart.update_discount(item, discount)
            logger.info(
                "line_item_discount_updated",
                customer_id=str(customer_id),
                line_id=item.line_id,
                discount=discount,
            )
            return item.snapshot()

    def get_cart(self, customer_id) -> CartSnapshot | None:
        with self.store.lock:
            cart = self.store.get(customer_id)
            return cart.snapshot() if cart is not None else None

    def delete_cart(self, customer_id) -> None:
        self.store.delete(customer_id)
        logger.info("cart_deleted", customer_id=str(customer_id))

    def generate_invoice(self, customer_id, payment_option) -> Invoice:
        """Price the customer's cart into an invoice. The cart itself is left untouched."""
        validate_payment_option(payment_option)

        cart = self.get_cart(customer_id)
        if cart is None or cart.is_empty:
            raise InvalidStateError("Cart is empty")

        customer = self.directory.get_customer(str(customer_id))
        if customer is None:
            raise InvalidStateError("Customer not found")

        invoice = Invoice.create(customer=customer, items=cart.items, payment_option=payment_option)
        logger.info(
            "invoice_generated",
            customer_id=str(customer_id),
            invoice_number=invoice.invoice_number,
            total=invoice.total,
        )
        return invoice


_current_engine: CartEngine | None = None


def get_engine() -> CartEngine:
    """Return the process-wide engine, creating it on first use."""
    global _current_engine
    if _current_engine is None:
        _current_engine = CartEngine()
    return _current_engine


def set_engine(engine: CartEngine) -> None:
    """Override the process-wide engine (useful for tests)."""
    global _current_engine
    _current_engine = engine


def reset_engine() -> None:
    """Discard the process-wide engine and every cart it holds."""
    global _current_engine
    _current_engine = None
