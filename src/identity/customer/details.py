"""Customer detail updates and removal — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.customer.registration import ensure_email_available
from identity.domain import identity, logger


@identity.command(part_of="Customer")
class UpdateCustomer:
    """Replace a customer's details. Fails if the customer does not exist."""

    customer_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    address: String(required=True, max_length=255)
    contact_number: String(required=True, max_length=10)


@identity.command(part_of="Customer")
class RemoveCustomer:
    """Remove a customer. Fails if the customer does not exist."""

    customer_id: Identifier(required=True)


@identity.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        ensure_email_available(repo, command.email, exclude_customer_id=customer.id)

        customer.update_details(
            name=command.name,
            email=command.email,
            address=command.address,
            contact_number=command.contact_number,
        )
        repo.add(customer)

    @handle(RemoveCustomer)
    def remove_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        repo._dao.delete(customer)
        logger.info("customer_removed", customer_id=str(command.customer_id))
