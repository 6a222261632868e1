"""Ordering bounded context — shopping carts and invoicing.

Carts live in an in-memory CartStore owned by the CartEngine. Invoices are
immutable snapshots computed from a cart at checkout time.
"""

from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

