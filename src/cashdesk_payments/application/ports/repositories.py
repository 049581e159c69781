"""Repository ports for the four entity kinds.

Shared contract:
- get() returns None if the entity does not exist (no exception)
- Returned entities are copies; mutations do not affect stored state
- Changes become durable only when the owning UnitOfWork commits
- Implementations are NOT thread-safe; the UnitOfWork scopes their use
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashdesk_payments.application.dtos import PaymentFilter
    from cashdesk_payments.domain.entities import CashDesk, Employee, Payment, PaymentItem


class CashDeskRepository(ABC):
    """Port for cash desk lookup. Cash desks are never mutated by payments."""

    @abstractmethod
    def get(self, number: int) -> CashDesk | None:
        """Retrieve a cash desk by its number."""

    @abstractmethod
    def add(self, cash_desk: CashDesk) -> None:
        """Register a cash desk."""


class EmployeeRepository(ABC):
    """Port for employee lookup."""

    @abstractmethod
    def get(self, registration_number: int) -> Employee | None:
        """Retrieve an employee by registration number."""

    @abstractmethod
    def add(self, employee: Employee) -> None:
        """Register an employee."""


class PaymentRepository(ABC):
    """Port for payment persistence.

    Store-level invariant: at most one payment per cash desk with
    confirmed = None. Adapters enforce it no later than commit and report
    violations as IntegrityConflictError.
    """

    @abstractmethod
    def get(self, payment_id: int) -> Payment | None:
        """Retrieve a payment by ID.

        Args:
            payment_id: The generated payment identifier.

        Returns:
            The Payment entity if found, None otherwise.
        """

    @abstractmethod
    def find_open_for_cash_desk(self, cash_desk_number: int) -> Payment | None:
        """Return the payment of the cash desk that is not confirmed, if any."""

    @abstractmethod
    def add(self, payment: Payment) -> Payment:
        """Insert a new payment.

        Args:
            payment: Payment with id=None.

        Returns:
            The stored payment carrying its generated id.
        """

    @abstractmethod
    def update(self, payment: Payment) -> None:
        """Replace the stored state of an existing payment (matched by id)."""

    @abstractmethod
    def delete(self, payment_id: int) -> None:
        """Remove a payment. Its items must already be gone."""

    @abstractmethod
    def list(self, payment_filter: PaymentFilter) -> list[Payment]:
        """Return the payments matching the filter, ascending by id."""


class PaymentItemRepository(ABC):
    """Port for payment item persistence."""

    @abstractmethod
    def add(self, item: PaymentItem) -> PaymentItem:
        """Insert a new item and return it carrying its generated id."""

    @abstractmethod
    def list_for_payment(self, payment_id: int) -> list[PaymentItem]:
        """Return the items owned by a payment, ascending by id."""

    @abstractmethod
    def delete_for_payment(self, payment_id: int) -> int:
        """Remove every item owned by a payment.

        Returns:
            The number of removed items.
        """
