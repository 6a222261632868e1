"""Customer directory port (abstract interface).

Invoicing needs to resolve the customer who owns a cart. The ordering context
reads customers through this contract so it can be backed by the identity
domain in the application and by an in-memory fake in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerRecord:
    """Read-only view of a customer as printed on an invoice."""

    customer_id: str
    name: str
    email: str
    address: str | None = None
    contact_number: str | None = None


class CustomerDirectory(ABC):
    """Abstract customer lookup interface."""

    @abstractmethod
    def get_customer(self, customer_id: str) -> CustomerRecord | None:
        """Resolve a customer by identifier, or return None when unknown."""
        ...
