"""In-memory store with transactional units of work.

Used by the unit tests and by the `memory` store backend.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from threading import RLock
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentItemRepository,
    PaymentRepository,
    UnitOfWork,
)
from cashdesk_payments.domain.exceptions import IntegrityConflictError

if TYPE_CHECKING:
    from types import TracebackType

    from cashdesk_payments.application.dtos import PaymentFilter
    from cashdesk_payments.domain.entities import CashDesk, Employee, Payment, PaymentItem


class InMemoryStore:
    """Tables and id sequences shared by every unit of work of one store.

    Entities are frozen dataclasses, so the tables can be snapshotted with
    deepcopy and restored on rollback.
    """

    def __init__(self) -> None:
        self.lock = RLock()
        self.cash_desks: dict[int, CashDesk] = {}
        self.employees: dict[int, Employee] = {}
        self.payments: dict[int, Payment] = {}
        self.payment_items: dict[int, PaymentItem] = {}
        self.last_payment_id = 0
        self.last_payment_item_id = 0

    def snapshot(self) -> dict[str, object]:
        return copy.deepcopy(
            {
                "cash_desks": self.cash_desks,
                "employees": self.employees,
                "payments": self.payments,
                "payment_items": self.payment_items,
                "last_payment_id": self.last_payment_id,
                "last_payment_item_id": self.last_payment_item_id,
            }
        )

    def restore(self, snapshot: dict[str, object]) -> None:
        for name, value in snapshot.items():
            setattr(self, name, value)

    def check_integrity(self) -> None:
        """Enforce the constraints a relational schema would declare.

        Raises:
            IntegrityConflictError: On a second open payment for a cash desk,
                or on a reference to a missing row.
        """
        open_desks: set[int] = set()
        for payment in self.payments.values():
            if payment.cash_desk_number not in self.cash_desks:
                raise IntegrityConflictError(
                    f"Payment {payment.id} references unknown cash desk {payment.cash_desk_number}"
                )
            if payment.employee_registration_number not in self.employees:
                raise IntegrityConflictError(
                    f"Payment {payment.id} references unknown employee "
                    f"{payment.employee_registration_number}"
                )
            if payment.confirmed is None:
                if payment.cash_desk_number in open_desks:
                    raise IntegrityConflictError(
                        f"Cash desk {payment.cash_desk_number} has more than one open payment"
                    )
                open_desks.add(payment.cash_desk_number)

        for item in self.payment_items.values():
            if item.payment_id not in self.payments:
                raise IntegrityConflictError(
                    f"Payment item {item.id} references unknown payment {item.payment_id}"
                )


class InMemoryCashDeskRepository(CashDeskRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def get(self, number: int) -> CashDesk | None:
        return copy.deepcopy(self._store.cash_desks.get(number))

    def add(self, cash_desk: CashDesk) -> None:
        self._store.cash_desks[cash_desk.number] = copy.deepcopy(cash_desk)


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def get(self, registration_number: int) -> Employee | None:
        return copy.deepcopy(self._store.employees.get(registration_number))

    def add(self, employee: Employee) -> None:
        self._store.employees[employee.registration_number] = copy.deepcopy(employee)


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository.

    Implementation notes:
    - Returns deep copies from reads to mimic database detachment
    - Ids come from a per-store sequence, starting at 1
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def get(self, payment_id: int) -> Payment | None:
        return copy.deepcopy(self._store.payments.get(payment_id))

    def find_open_for_cash_desk(self, cash_desk_number: int) -> Payment | None:
        for payment in self._store.payments.values():
            if payment.cash_desk_number == cash_desk_number and payment.confirmed is None:
                return copy.deepcopy(payment)
        return None

    def add(self, payment: Payment) -> Payment:
        self._store.last_payment_id += 1
        stored = replace(payment, id=self._store.last_payment_id)
        self._store.payments[stored.id] = stored
        return copy.deepcopy(stored)

    def update(self, payment: Payment) -> None:
        if payment.id not in self._store.payments:
            raise KeyError(f"Payment {payment.id} is not stored")
        self._store.payments[payment.id] = copy.deepcopy(payment)

    def delete(self, payment_id: int) -> None:
        del self._store.payments[payment_id]

    def list(self, payment_filter: PaymentFilter) -> list[Payment]:
        return [
            copy.deepcopy(payment)
            for _, payment in sorted(self._store.payments.items())
            if payment_filter.matches(payment.cash_desk_number, payment.payment_date_time)
        ]


class InMemoryPaymentItemRepository(PaymentItemRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, item: PaymentItem) -> PaymentItem:
        self._store.last_payment_item_id += 1
        stored = replace(item, id=self._store.last_payment_item_id)
        self._store.payment_items[stored.id] = stored
        return copy.deepcopy(stored)

    def list_for_payment(self, payment_id: int) -> list[PaymentItem]:
        return [
            copy.deepcopy(item)
            for _, item in sorted(self._store.payment_items.items())
            if item.payment_id == payment_id
        ]

    def delete_for_payment(self, payment_id: int) -> int:
        owned = [i for i, item in self._store.payment_items.items() if item.payment_id == payment_id]
        for item_id in owned:
            del self._store.payment_items[item_id]
        return len(owned)


class InMemoryUnitOfWork(UnitOfWork):
    """Serializable unit of work over an InMemoryStore.

    Holds the store lock from __enter__ to __exit__, so units of work on
    the same store never interleave. Repositories write straight into the
    store; rollback() restores the snapshot taken on entry.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._snapshot: dict[str, object] | None = None
        self.cash_desks = InMemoryCashDeskRepository(store)
        self.employees = InMemoryEmployeeRepository(store)
        self.payments = InMemoryPaymentRepository(store)
        self.payment_items = InMemoryPaymentItemRepository(store)

    def __enter__(self) -> InMemoryUnitOfWork:
        self._store.lock.acquire()
        self._snapshot = self._store.snapshot()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self._snapshot = None
            self._store.lock.release()

    def commit(self) -> None:
        try:
            self._store.check_integrity()
        except IntegrityConflictError:
            self.rollback()
            raise
        self._snapshot = self._store.snapshot()

    def rollback(self) -> None:
        if self._snapshot is not None:
            self._store.restore(copy.deepcopy(self._snapshot))


class InMemoryUnitOfWorkFactory:
    """Callable producing units of work over one shared store."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store if store is not None else InMemoryStore()

    def __call__(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self.store)
