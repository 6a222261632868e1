"""Customer registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity, logger


def ensure_email_available(repo, email, exclude_customer_id=None):
    """Reject an email already used by another customer (case-insensitive)."""
    wanted = email.strip().lower()
    for existing in repo._dao.query.limit(None).all().items:
        if exclude_customer_id is not None and str(existing.id) == str(exclude_customer_id):
            continue
        if existing.email.normalized == wanted:
            raise ValidationError({"email": ["Customer email already exists"]})


@identity.command(part_of="Customer")
class RegisterCustomer:
    """Create a new customer."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    address: String(required=True, max_length=255)
    contact_number: String(required=True, max_length=10)


@identity.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)
        ensure_email_available(repo, command.email)

        customer = Customer.register(
            name=command.name,
            email=command.email,
            address=command.address,
            contact_number=command.contact_number,
        )
        repo.add(customer)
        logger.info("customer_registered", customer_id=str(customer.id))
        return str(customer.id)
