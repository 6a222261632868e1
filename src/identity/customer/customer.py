"""Customer aggregate root."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, ValueObject

from identity.domain import identity
from identity.shared.contact_number import ContactNumber
from identity.shared.email import EmailAddress


def _require(field_name, value, message):
    if value is None or not str(value).strip():
        raise ValidationError({field_name: [message]})


@identity.aggregate
class Customer:
    """A person who can own a cart and be billed on an invoice.

    Email addresses are unique across customers, compared case-insensitively.
    That rule spans aggregates, so the command handlers enforce it against the
    repository before a customer is added or changed.
    """

    name: String(required=True, max_length=100)
    email: ValueObject(EmailAddress, required=True)
    address: String(required=True, max_length=255)
    contact_number: ValueObject(ContactNumber, required=True)
    registered_at: DateTime(default=datetime.now)
    updated_at: DateTime()

    @staticmethod
    def validate_details(name, email, address, contact_number):
        _require("name", name, "Customer name cannot be empty")
        _require("email", email, "Customer email cannot be empty")
        _require("address", address, "Customer address cannot be empty")
        _require("contact_number", contact_number, "Customer contact number cannot be empty")

    @classmethod
    def register(cls, name, email, address, contact_number):
        from identity.customer.events import CustomerRegistered

        cls.validate_details(name, email, address, contact_number)

        now = datetime.now()
        customer = cls(
            name=name.strip(),
            email=EmailAddress(address=email.strip()),
            address=address.strip(),
            contact_number=ContactNumber(number=contact_number.strip()),
            registered_at=now,
            updated_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=customer.name,
                email=customer.email.address,
                registered_at=now,
            )
        )
        return customer

    def update_details(self, name, email, address, contact_number):
        from identity.customer.events import CustomerDetailsUpdated

        self.validate_details(name, email, address, contact_number)

        self.name = name.strip()
        self.email = EmailAddress(address=email.strip())
        self.address = address.strip()
        self.contact_number = ContactNumber(number=contact_number.strip())
        self.updated_at = datetime.now()

        self.raise_(
            CustomerDetailsUpdated(
                customer_id=self.id,
                name=self.name,
                email=self.email.address,
            )
        )
