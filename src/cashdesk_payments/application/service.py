from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from cashdesk_payments.application.dtos import (
    NewPaymentCommand,
    NewPaymentItemCommand,
    PaymentFilter,
)
from cashdesk_payments.application.use_cases import (
    AddPaymentItemUseCase,
    ConfirmPaymentUseCase,
    DeletePaymentUseCase,
    ListPaymentsUseCase,
    OpenPaymentRequest,
    OpenPaymentUseCase,
)

if TYPE_CHECKING:
    from cashdesk_payments.application.ports import (
        LockProvider,
        TimeProvider,
        UnitOfWorkFactory,
    )
    from cashdesk_payments.domain.entities import Payment, PaymentItem
    from cashdesk_payments.domain.value_objects import PaymentType


class PaymentLifecycleService:
    """Single entry point for the payment lifecycle.

    Each state-changing method runs exactly one use case, i.e. one lock
    acquisition and one unit of work. Domain exceptions propagate unchanged
    to the caller.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        uow_factory: UnitOfWorkFactory,
    ) -> None:
        self._open = OpenPaymentUseCase(lock_provider, time_provider, uow_factory)
        self._confirm = ConfirmPaymentUseCase(lock_provider, time_provider, uow_factory)
        self._add_item = AddPaymentItemUseCase(lock_provider, uow_factory)
        self._delete = DeletePaymentUseCase(lock_provider, uow_factory)
        self._queries = ListPaymentsUseCase(uow_factory)

    def open_payment(
        self,
        cash_desk_number: int,
        employee_registration_number: int,
        payment_type: PaymentType,
    ) -> Payment:
        return self._open.execute(
            OpenPaymentRequest(
                cash_desk_number=cash_desk_number,
                employee_registration_number=employee_registration_number,
                payment_type=payment_type,
            )
        )

    def create_payment(self, command: NewPaymentCommand) -> Payment:
        """Open a payment from an API command.

        Raises:
            InvalidPaymentTypeError: payment_type_text is not a payment type.
        """
        return self.open_payment(
            cash_desk_number=command.cash_desk_number,
            employee_registration_number=command.employee_registration_number,
            payment_type=command.payment_type,
        )

    def confirm_payment(self, payment_id: int) -> None:
        self._confirm.execute(payment_id)

    def add_payment_item(
        self,
        payment_id: int,
        article_name: str,
        amount: int,
        price: Decimal,
    ) -> PaymentItem:
        return self._add_item.execute(
            NewPaymentItemCommand(
                article_name=article_name,
                amount=amount,
                price=price,
                payment_id=payment_id,
            )
        )

    def add_item(self, command: NewPaymentItemCommand) -> PaymentItem:
        return self._add_item.execute(command)

    def delete_payment(self, payment_id: int, delete_items: bool) -> None:
        self._delete.execute(payment_id, delete_items)

    def list_payments(
        self,
        cash_desk_number: int | None = None,
        date_from: date | None = None,
    ) -> list[Payment]:
        return self._queries.execute(
            PaymentFilter(cash_desk_number=cash_desk_number, date_from=date_from)
        )

    def get_payment(self, payment_id: int) -> Payment:
        return self._queries.get(payment_id)

    def list_payment_items(self, payment_id: int) -> list[PaymentItem]:
        return self._queries.items(payment_id)
