from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType

    from cashdesk_payments.application.ports.repositories import (
        CashDeskRepository,
        EmployeeRepository,
        PaymentItemRepository,
        PaymentRepository,
    )


class UnitOfWork(ABC):
    """Port for one store transaction.

    Contract:
    - Repositories are usable only inside the `with` block
    - commit() applies every change made since entering, or none of them
    - Leaving the block without commit() rolls back, including on exception
    - commit() raises IntegrityConflictError when a store constraint
      (one open payment per cash desk, item → payment reference) is violated;
      the transaction is rolled back before the error propagates

    Usage:
        with uow_factory() as uow:
            payment = uow.payments.get(payment_id)
            ...
            uow.commit()
    """

    cash_desks: CashDeskRepository
    employees: EmployeeRepository
    payments: PaymentRepository
    payment_items: PaymentItemRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Apply all pending changes atomically."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard all pending changes. A no-op after a successful commit."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
