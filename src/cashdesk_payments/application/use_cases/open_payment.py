from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports.lock_provider import cash_desk_resource
from cashdesk_payments.domain.entities import Payment
from cashdesk_payments.domain.exceptions import (
    CASH_DESK_NOT_FOUND,
    EMPLOYEE_NOT_FOUND,
    INSUFFICIENT_RIGHTS,
    OPEN_PAYMENT_EXISTS,
    CashDeskNotFoundError,
    EmployeeNotFoundError,
    InsufficientRightsError,
    IntegrityConflictError,
    OpenPaymentExistsError,
)
from cashdesk_payments.domain.value_objects import PaymentType

if TYPE_CHECKING:
    from cashdesk_payments.application.ports import (
        LockProvider,
        TimeProvider,
        UnitOfWork,
        UnitOfWorkFactory,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OpenPaymentRequest:
    """Input DTO for open payment use case."""

    cash_desk_number: int
    employee_registration_number: int
    payment_type: PaymentType


class OpenPaymentUseCase:
    """Opens a payment at a cash desk.

    Responsibilities:
    - Acquire the cash desk lock so two opens on one desk are serialized
    - Resolve the employee and check the credit card role rule
    - Reject a second open payment on the same cash desk
    - Stamp the payment with the current time and persist it

    Check order: employee exists, role allows the payment type, desk has
    no open payment, desk exists.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        uow_factory: UnitOfWorkFactory,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._uow_factory = uow_factory

    def execute(self, request: OpenPaymentRequest) -> Payment:
        """Execute the open payment workflow.

        Returns:
            The persisted Payment with its generated id.

        Raises:
            EmployeeNotFoundError: Unknown employee registration number.
            InsufficientRightsError: Credit card payment by a non-manager.
            OpenPaymentExistsError: The cash desk already has an open payment.
            CashDeskNotFoundError: Unknown cash desk number.
        """
        with self._lock_provider.acquire(cash_desk_resource(request.cash_desk_number)):
            with self._uow_factory() as uow:
                payment = self._execute_within_unit_of_work(uow, request)

        logger.info(
            "Opened payment %s at cash desk %s (%s) by employee %s",
            payment.id,
            payment.cash_desk_number,
            payment.payment_type.value,
            payment.employee_registration_number,
        )
        return payment

    def _execute_within_unit_of_work(
        self, uow: UnitOfWork, request: OpenPaymentRequest
    ) -> Payment:
        now = self._time_provider.now()

        employee = uow.employees.get(request.employee_registration_number)
        if employee is None:
            raise EmployeeNotFoundError(EMPLOYEE_NOT_FOUND)

        if request.payment_type == PaymentType.CREDIT_CARD and not employee.is_manager:
            logger.warning(
                "Employee %s (%s) may not open a credit card payment",
                employee.registration_number,
                employee.role.value,
            )
            raise InsufficientRightsError(INSUFFICIENT_RIGHTS)

        if uow.payments.find_open_for_cash_desk(request.cash_desk_number) is not None:
            logger.warning("Cash desk %s already has an open payment", request.cash_desk_number)
            raise OpenPaymentExistsError(OPEN_PAYMENT_EXISTS)

        if uow.cash_desks.get(request.cash_desk_number) is None:
            raise CashDeskNotFoundError(CASH_DESK_NOT_FOUND)

        try:
            payment = uow.payments.add(
                Payment.open(
                    cash_desk_number=request.cash_desk_number,
                    employee_registration_number=employee.registration_number,
                    payment_type=request.payment_type,
                    now=now,
                )
            )
            uow.commit()
        except IntegrityConflictError as e:
            # Another process opened a payment on this desk after our check
            raise OpenPaymentExistsError(OPEN_PAYMENT_EXISTS) from e

        return payment
