"""In-memory customer directory for development and testing."""

from ordering.customers.port import CustomerDirectory, CustomerRecord


class InMemoryCustomerDirectory(CustomerDirectory):
    """Customer directory holding records in a dict. Records lookups in ``calls``."""

    def __init__(self, customers: list[CustomerRecord] | None = None) -> None:
        self._customers: dict[str, CustomerRecord] = {}
        self.calls: list[str] = []
        for customer in customers or []:
            self.add(customer)

    def add(self, customer: CustomerRecord) -> None:
        self._customers[str(customer.customer_id)] = customer

    def remove(self, customer_id: str) -> None:
        self._customers.pop(str(customer_id), None)

    def get_customer(self, customer_id: str) -> CustomerRecord | None:
        self.calls.append(str(customer_id))
        return self._customers.get(str(customer_id))
