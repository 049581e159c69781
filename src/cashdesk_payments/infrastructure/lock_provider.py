from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """Process-local lock provider keyed by resource id.

    Two-phase locking:
    1. Global lock protects the lock dictionary during lookup/creation
    2. Resource lock serializes access to one cash desk or payment

    Limitations:
    - Single-process only; across processes the store constraints
      (partial unique index, foreign keys) are the guard
    - Locks are never evicted; one entry per cash desk and per payment touched
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._global_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._global_lock:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded unit tests, and for tests that exercise the
    store-level constraints without the use-case lock in front of them.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
