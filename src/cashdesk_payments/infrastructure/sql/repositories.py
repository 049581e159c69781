from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from cashdesk_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentItemRepository,
    PaymentRepository,
)
from cashdesk_payments.domain.entities import CashDesk, Employee, Payment, PaymentItem
from cashdesk_payments.domain.exceptions import IntegrityConflictError
from cashdesk_payments.domain.value_objects import EmployeeRole, PaymentType
from cashdesk_payments.infrastructure.sql.models import (
    CashDeskRow,
    EmployeeRow,
    PaymentItemRow,
    PaymentRow,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from cashdesk_payments.application.dtos import PaymentFilter


def flush(session: Session) -> None:
    """Flush pending changes, reporting constraint violations as domain conflicts."""
    try:
        session.flush()
    except IntegrityError as e:
        raise IntegrityConflictError(str(e.orig)) from e


def _to_payment(row: PaymentRow) -> Payment:
    return Payment(
        id=row.id,
        cash_desk_number=row.cash_desk_number,
        employee_registration_number=row.employee_registration_number,
        payment_type=PaymentType(row.payment_type),
        payment_date_time=row.payment_date_time,
        confirmed=row.confirmed,
    )


def _to_payment_item(row: PaymentItemRow) -> PaymentItem:
    return PaymentItem(
        id=row.id,
        payment_id=row.payment_id,
        article_name=row.article_name,
        amount=row.amount,
        price=row.price,
    )


class SqlCashDeskRepository(CashDeskRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, number: int) -> CashDesk | None:
        row = self._session.get(CashDeskRow, number)
        return None if row is None else CashDesk(number=row.number)

    def add(self, cash_desk: CashDesk) -> None:
        self._session.add(CashDeskRow(number=cash_desk.number))
        flush(self._session)


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, registration_number: int) -> Employee | None:
        row = self._session.get(EmployeeRow, registration_number)
        if row is None:
            return None
        return Employee(
            registration_number=row.registration_number,
            first_name=row.first_name,
            last_name=row.last_name,
            role=EmployeeRole(row.type),
        )

    def add(self, employee: Employee) -> None:
        self._session.add(
            EmployeeRow(
                registration_number=employee.registration_number,
                first_name=employee.first_name,
                last_name=employee.last_name,
                type=employee.role.value,
            )
        )
        flush(self._session)


class SqlPaymentRepository(PaymentRepository):
    """Payment repository over a SQLAlchemy session.

    add() flushes to obtain the generated id; the partial unique index on
    open payments may therefore fire on add() rather than on commit.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, payment_id: int) -> Payment | None:
        row = self._session.get(PaymentRow, payment_id)
        return None if row is None else _to_payment(row)

    def find_open_for_cash_desk(self, cash_desk_number: int) -> Payment | None:
        row = self._session.scalars(
            select(PaymentRow).where(
                PaymentRow.cash_desk_number == cash_desk_number,
                PaymentRow.confirmed.is_(None),
            )
        ).first()
        return None if row is None else _to_payment(row)

    def add(self, payment: Payment) -> Payment:
        row = PaymentRow(
            cash_desk_number=payment.cash_desk_number,
            employee_registration_number=payment.employee_registration_number,
            payment_type=payment.payment_type.value,
            payment_date_time=payment.payment_date_time,
            confirmed=payment.confirmed,
        )
        self._session.add(row)
        flush(self._session)
        return _to_payment(row)

    def update(self, payment: Payment) -> None:
        row = self._session.get(PaymentRow, payment.id)
        if row is None:
            raise KeyError(f"Payment {payment.id} is not stored")
        row.cash_desk_number = payment.cash_desk_number
        row.employee_registration_number = payment.employee_registration_number
        row.payment_type = payment.payment_type.value
        row.payment_date_time = payment.payment_date_time
        row.confirmed = payment.confirmed

    def delete(self, payment_id: int) -> None:
        try:
            self._session.execute(delete(PaymentRow).where(PaymentRow.id == payment_id))
        except IntegrityError as e:
            raise IntegrityConflictError(str(e.orig)) from e

    def list(self, payment_filter: PaymentFilter) -> list[Payment]:
        query = select(PaymentRow).order_by(PaymentRow.id)
        if payment_filter.cash_desk_number is not None:
            query = query.where(PaymentRow.cash_desk_number == payment_filter.cash_desk_number)
        if payment_filter.date_from_start is not None:
            query = query.where(PaymentRow.payment_date_time >= payment_filter.date_from_start)
        return [_to_payment(row) for row in self._session.scalars(query)]


class SqlPaymentItemRepository(PaymentItemRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, item: PaymentItem) -> PaymentItem:
        row = PaymentItemRow(
            article_name=item.article_name,
            amount=item.amount,
            price=item.price,
            payment_id=item.payment_id,
        )
        self._session.add(row)
        flush(self._session)
        # Hand back what the store holds, not the caller's value
        self._session.refresh(row)
        return _to_payment_item(row)

    def list_for_payment(self, payment_id: int) -> list[PaymentItem]:
        rows = self._session.scalars(
            select(PaymentItemRow)
            .where(PaymentItemRow.payment_id == payment_id)
            .order_by(PaymentItemRow.id)
        )
        return [_to_payment_item(row) for row in rows]

    def delete_for_payment(self, payment_id: int) -> int:
        result = self._session.execute(
            delete(PaymentItemRow).where(PaymentItemRow.payment_id == payment_id)
        )
        return result.rowcount
