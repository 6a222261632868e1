import pytest
from ordering.cart.engine import reset_engine
from ordering.customers import InMemoryCustomerDirectory, reset_directory, set_directory
from ordering.customers.port import CustomerRecord
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield
    reset_engine()
    reset_directory()


@pytest.fixture(scope="session")
def _identity_domain():
    from identity.domain import identity

    identity.init()
    return identity


@pytest.fixture()
def identity_domain(_identity_domain):
    """The identity domain, with its in-memory data cleared after the test."""
    yield _identity_domain

    with _identity_domain.domain_context():
        for _, provider in _identity_domain.providers.items():
            provider._data_reset()
        _identity_domain.event_store.store._data_reset()


@pytest.fixture()
def alice():
    return CustomerRecord(
        customer_id="cust-001",
        name="Alice Smith",
        email="alice@example.com",
        address="1 Main Street",
        contact_number="5551234567",
    )


@pytest.fixture()
def directory(alice):
    """In-memory customer directory holding ``alice``, installed as the active directory."""
    customers = InMemoryCustomerDirectory([alice])
    set_directory(customers)
    return customers
