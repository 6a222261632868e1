"""Customer directory factory.

Provides get_directory() / set_directory() to swap implementations:
- IdentityCustomerDirectory, reading the identity domain (default)
- InMemoryCustomerDirectory for development and testing
"""

from ordering.customers.identity_adapter import IdentityCustomerDirectory
from ordering.customers.memory_adapter import InMemoryCustomerDirectory
from ordering.customers.port import CustomerDirectory, CustomerRecord

__all__ = [
    "CustomerDirectory",
    "CustomerRecord",
    "IdentityCustomerDirectory",
    "InMemoryCustomerDirectory",
    "get_directory",
    "reset_directory",
    "set_directory",
]

_current_directory: CustomerDirectory | None = None


def get_directory() -> CustomerDirectory:
    """Return the current customer directory. Defaults to the identity-backed one."""
    global _current_directory
    if _current_directory is None:
        _current_directory = IdentityCustomerDirectory()
    return _current_directory


def set_directory(directory: CustomerDirectory) -> None:
    """Override the active customer directory (useful for tests)."""
    global _current_directory
    _current_directory = directory


def reset_directory() -> None:
    """Reset to default directory."""
    global _current_directory
    _current_directory = None
