"""Fixtures for end-to-end tests against the assembled FastAPI application.

Requests run through the app's middleware, which pushes the identity,
catalogue or ordering domain context based on the URL prefix.
"""

import os

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def _app(request):
    """Import the application once per session, initializing all domains."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


@pytest.fixture
def client(_app):
    """Test client for the full application, with every domain cleaned afterwards."""
    yield TestClient(_app)

    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.cart.engine import reset_engine
    from ordering.customers import reset_directory
    from ordering.domain import ordering

    for domain in (identity, catalogue, ordering):
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()

            for _, broker in domain.brokers.items():
                broker._data_reset()

            domain.event_store.store._data_reset()

    reset_engine()
    reset_directory()
