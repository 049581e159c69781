from __future__ import annotations

from typing import TYPE_CHECKING

from cashdesk_payments.domain.exceptions import PAYMENT_NOT_FOUND, PaymentNotFoundError

if TYPE_CHECKING:
    from cashdesk_payments.application.dtos import PaymentFilter
    from cashdesk_payments.application.ports import UnitOfWorkFactory
    from cashdesk_payments.domain.entities import Payment, PaymentItem


class ListPaymentsUseCase:
    """Read paths over payments. No resource locks; store read consistency only."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def execute(self, payment_filter: PaymentFilter) -> list[Payment]:
        """Return the payments matching the filter, ascending by id."""
        with self._uow_factory() as uow:
            return uow.payments.list(payment_filter)

    def get(self, payment_id: int) -> Payment:
        with self._uow_factory() as uow:
            payment = uow.payments.get(payment_id)
        if payment is None:
            raise PaymentNotFoundError(PAYMENT_NOT_FOUND)
        return payment

    def items(self, payment_id: int) -> list[PaymentItem]:
        with self._uow_factory() as uow:
            if uow.payments.get(payment_id) is None:
                raise PaymentNotFoundError(PAYMENT_NOT_FOUND)
            return uow.payment_items.list_for_payment(payment_id)
