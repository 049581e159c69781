"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from cashdesk_payments.application.service import PaymentLifecycleService
from cashdesk_payments.domain.entities import CashDesk, Employee, Payment
from cashdesk_payments.domain.value_objects import EmployeeRole, PaymentType
from cashdesk_payments.infrastructure.in_memory import InMemoryUnitOfWorkFactory
from cashdesk_payments.infrastructure.lock_provider import NoOpLockProvider
from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider

CASHIER_NUMBER = 1001
MANAGER_NUMBER = 2001


@pytest.fixture
def now() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 5, 13, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(now: datetime) -> FixedTimeProvider:
    return FixedTimeProvider(now)


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def uow_factory() -> InMemoryUnitOfWorkFactory:
    return InMemoryUnitOfWorkFactory()


@pytest.fixture
def cashier() -> Employee:
    return Employee(
        registration_number=CASHIER_NUMBER,
        first_name="Max",
        last_name="Muster",
        role=EmployeeRole.CASHIER,
    )


@pytest.fixture
def manager() -> Employee:
    return Employee(
        registration_number=MANAGER_NUMBER,
        first_name="Anna",
        last_name="Huber",
        role=EmployeeRole.MANAGER,
    )


@pytest.fixture
def seed(
    uow_factory: InMemoryUnitOfWorkFactory, cashier: Employee, manager: Employee
) -> Callable[..., None]:
    """Registers cash desks 1-3, the cashier and the manager, plus extra rows."""

    def _seed(*payments: Payment) -> None:
        with uow_factory() as uow:
            for number in (1, 2, 3):
                uow.cash_desks.add(CashDesk(number=number))
            uow.employees.add(cashier)
            uow.employees.add(manager)
            for payment in payments:
                uow.payments.add(payment)
            uow.commit()

    return _seed


@pytest.fixture
def service(
    lock_provider: NoOpLockProvider,
    time_provider: FixedTimeProvider,
    uow_factory: InMemoryUnitOfWorkFactory,
) -> PaymentLifecycleService:
    return PaymentLifecycleService(
        lock_provider=lock_provider,
        time_provider=time_provider,
        uow_factory=uow_factory,
    )


@pytest.fixture
def make_payment() -> Callable[..., Payment]:
    """Builds a not yet persisted payment; cashier and cash by default."""

    def _make(
        cash_desk_number: int,
        payment_date_time: datetime,
        employee_registration_number: int = CASHIER_NUMBER,
        payment_type: PaymentType = PaymentType.CASH,
        confirmed: datetime | None = None,
    ) -> Payment:
        return Payment(
            id=None,
            cash_desk_number=cash_desk_number,
            employee_registration_number=employee_registration_number,
            payment_type=payment_type,
            payment_date_time=payment_date_time,
            confirmed=confirmed,
        )

    return _make
