"""Customer directory backed by the identity domain's Customer repository."""

from protean.exceptions import ObjectNotFoundError

from ordering.customers.port import CustomerDirectory, CustomerRecord


class IdentityCustomerDirectory(CustomerDirectory):
    """Reads customers from the identity domain, inside its own domain context."""

    def __init__(self, domain=None) -> None:
        self._domain = domain

    @property
    def domain(self):
        if self._domain is None:
            from identity.domain import identity

            self._domain = identity
        return self._domain

    def get_customer(self, customer_id: str) -> CustomerRecord | None:
        from identity.customer.customer import Customer

        with self.domain.domain_context():
            try:
                customer = self.domain.repository_for(Customer).get(customer_id)
            except ObjectNotFoundError:
                return None

            return CustomerRecord(
                customer_id=str(customer.id),
                name=customer.name,
                email=customer.email.address,
                address=customer.address,
                contact_number=customer.contact_number.number,
            )
