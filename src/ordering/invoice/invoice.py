"""Invoice snapshot — the priced, immutable record of a cart at checkout.

An invoice copies the cart's line items when it is generated and never refers
back to the live cart, so later cart changes do not alter it. Invoices are not
stored; the caller receives the snapshot and owns it.
"""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from ordering.cart.cart import LineItemSnapshot
from ordering.customers.port import CustomerRecord

TAX_RATE = 0.10


class PaymentOption(Enum):
    CREDIT_CARD = "CreditCard"
    DEBIT_CARD = "DebitCard"
    PAYPAL = "PayPal"
    CASH = "Cash"

    @classmethod
    def values(cls) -> frozenset[str]:
        return frozenset(option.value for option in cls)


@dataclass(frozen=True)
class Invoice:
    invoice_number: str
    customer: CustomerRecord
    items: tuple[LineItemSnapshot, ...]
    subtotal: float
    discount: float
    tax: float
    total: float
    payment_option: str
    generated_at: datetime

    @classmethod
    def create(cls, customer: CustomerRecord, items, payment_option: str) -> "Invoice":
        """Price ``items`` and build the invoice.

        ``subtotal`` sums the stored line totals, which already net out each
        line's discount. ``discount`` is the sum of line discounts, reported for
        information only.
        """
        items = tuple(items)
        subtotal = sum(item.total for item in items)
        discount = sum(item.discount for item in items)
        tax = subtotal * TAX_RATE

        return cls(
            invoice_number=f"INV-{uuid4().hex[:8].upper()}",
            customer=customer,
            items=items,
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            total=subtotal + tax,
            payment_option=payment_option,
            generated_at=datetime.now(UTC),
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["items"] = [asdict(item) for item in self.items]
        return data
