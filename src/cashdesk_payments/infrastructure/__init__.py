"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Stores: In-memory and SQLAlchemy units of work with their repositories
- Time Provider: Clock abstraction for testability
- Locking: Per-resource locks for cash desks and payments

Infrastructure adapters implement the ports defined in the application layer.
"""

from cashdesk_payments.infrastructure.in_memory import InMemoryStore, InMemoryUnitOfWorkFactory
from cashdesk_payments.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryLockProvider",
    "InMemoryStore",
    "InMemoryUnitOfWorkFactory",
    "NoOpLockProvider",
    "SystemTimeProvider",
]
