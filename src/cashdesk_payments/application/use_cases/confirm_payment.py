from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports.lock_provider import payment_resource
from cashdesk_payments.domain.exceptions import (
    PAYMENT_ALREADY_CONFIRMED,
    PAYMENT_NOT_FOUND,
    PaymentAlreadyConfirmedError,
    PaymentNotFoundError,
)

if TYPE_CHECKING:
    from cashdesk_payments.application.ports import (
        LockProvider,
        TimeProvider,
        UnitOfWorkFactory,
    )

logger = logging.getLogger(__name__)


class ConfirmPaymentUseCase:
    """Closes an open payment by stamping its confirmation time.

    Not idempotent: confirming a confirmed payment fails.
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

    def execute(self, payment_id: int) -> None:
        """Confirm the payment.

        Raises:
            PaymentNotFoundError: Payment does not exist.
            PaymentAlreadyConfirmedError: Payment was confirmed before.
        """
        with self._lock_provider.acquire(payment_resource(payment_id)):
            with self._uow_factory() as uow:
                now = self._time_provider.now()

                payment = uow.payments.get(payment_id)
                if payment is None:
                    raise PaymentNotFoundError(PAYMENT_NOT_FOUND)

                if payment.is_confirmed:
                    logger.warning("Payment %s is already confirmed", payment_id)
                    raise PaymentAlreadyConfirmedError(PAYMENT_ALREADY_CONFIRMED)

                uow.payments.update(payment.confirm(now))
                uow.commit()

        logger.info("Confirmed payment %s", payment_id)
