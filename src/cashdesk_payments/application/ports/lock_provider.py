from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def cash_desk_resource(cash_desk_number: int) -> str:
    """Lock resource id guarding the open-payment slot of a cash desk."""
    return f"cash-desk:{cash_desk_number}"


def payment_resource(payment_id: int) -> str:
    """Lock resource id guarding one payment and its items."""
    return f"payment:{payment_id}"


class LockProvider(ABC):
    """Port for resource-level locking.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST be blocking (waits until lock is available)
    - Different resource_ids MAY be acquired concurrently

    Locks narrow the window between a use case's precondition check and its
    write. The store's own constraints remain the final guard.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Acquire a lock for the given resource ID.

        Args:
            resource_id: Canonical string identifier for the resource,
                         built with cash_desk_resource() or payment_resource().

        Yields:
            None. The lock is held for the duration of the context.
        """
        ...
