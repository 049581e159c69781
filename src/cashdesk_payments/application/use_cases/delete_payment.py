from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports.lock_provider import payment_resource
from cashdesk_payments.domain.exceptions import (
    PAYMENT_HAS_ITEMS,
    PAYMENT_NOT_FOUND,
    IntegrityConflictError,
    PaymentHasItemsError,
    PaymentNotFoundError,
)

if TYPE_CHECKING:
    from cashdesk_payments.application.ports import LockProvider, UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeletePaymentUseCase:
    """Removes a payment, optionally together with its items.

    Deletion is allowed for open and confirmed payments alike. Without
    delete_items, a payment that still owns items is rejected rather than
    cascaded.
    """

    def __init__(self, lock_provider: LockProvider, uow_factory: UnitOfWorkFactory) -> None:
        self._lock_provider = lock_provider
        self._uow_factory = uow_factory

    def execute(self, payment_id: int, delete_items: bool) -> None:
        """Delete the payment.

        Raises:
            PaymentNotFoundError: Payment does not exist.
            PaymentHasItemsError: delete_items is False but items exist.
        """
        with self._lock_provider.acquire(payment_resource(payment_id)):
            with self._uow_factory() as uow:
                if uow.payments.get(payment_id) is None:
                    raise PaymentNotFoundError(PAYMENT_NOT_FOUND)

                removed_items = 0
                if delete_items:
                    removed_items = uow.payment_items.delete_for_payment(payment_id)
                elif uow.payment_items.list_for_payment(payment_id):
                    logger.warning("Payment %s still owns items; not deleted", payment_id)
                    raise PaymentHasItemsError(PAYMENT_HAS_ITEMS)

                try:
                    uow.payments.delete(payment_id)
                    uow.commit()
                except IntegrityConflictError as e:
                    raise PaymentHasItemsError(PAYMENT_HAS_ITEMS) from e

        logger.info("Deleted payment %s with %d item(s)", payment_id, removed_items)
