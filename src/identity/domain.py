"""Identity bounded context — customer accounts.

Customers are plain CQRS aggregates held in the configured (in-memory) provider.
The ordering context reads them through its CustomerDirectory port when an
invoice is generated.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
