"""Read-side helpers for customers."""

from protean.utils.globals import current_domain

from identity.customer.customer import Customer


def list_customers():
    return current_domain.repository_for(Customer)._dao.query.limit(None).all().items


def get_customer(customer_id):
    """Return the customer; raises ObjectNotFoundError when it does not exist."""
    return current_domain.repository_for(Customer).get(customer_id)
