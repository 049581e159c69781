from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cashdesk_payments.application.ports.lock_provider import payment_resource
from cashdesk_payments.domain.entities import PaymentItem
from cashdesk_payments.domain.exceptions import (
    PAYMENT_ALREADY_CONFIRMED,
    PAYMENT_NOT_FOUND,
    PaymentAlreadyConfirmedError,
    PaymentNotFoundError,
)

if TYPE_CHECKING:
    from cashdesk_payments.application.dtos import NewPaymentItemCommand
    from cashdesk_payments.application.ports import LockProvider, UnitOfWorkFactory

logger = logging.getLogger(__name__)


class AddPaymentItemUseCase:
    """Attaches an item to an open payment.

    Holds the payment lock so an item cannot slip in while the same
    payment is being confirmed or deleted.
    """

    def __init__(self, lock_provider: LockProvider, uow_factory: UnitOfWorkFactory) -> None:
        self._lock_provider = lock_provider
        self._uow_factory = uow_factory

    def execute(self, command: NewPaymentItemCommand) -> PaymentItem:
        """Add the item described by the command.

        Returns:
            The persisted PaymentItem with its generated id.

        Raises:
            InvalidArticleNameError: Blank article name.
            InvalidAmountError: Quantity is not a positive integer.
            PaymentNotFoundError: Payment does not exist.
            PaymentAlreadyConfirmedError: Payment is closed.
        """
        with self._lock_provider.acquire(payment_resource(command.payment_id)):
            with self._uow_factory() as uow:
                payment = uow.payments.get(command.payment_id)
                if payment is None:
                    raise PaymentNotFoundError(PAYMENT_NOT_FOUND)

                if payment.is_confirmed:
                    logger.warning(
                        "Rejected item %r for confirmed payment %s",
                        command.article_name,
                        command.payment_id,
                    )
                    raise PaymentAlreadyConfirmedError(PAYMENT_ALREADY_CONFIRMED)

                item = uow.payment_items.add(
                    PaymentItem.create(
                        payment_id=payment.id,
                        article_name=command.article_name,
                        amount=command.amount,
                        price=command.price,
                    )
                )
                uow.commit()

        logger.info(
            "Added item %s (%s x %s) to payment %s",
            item.id,
            item.amount,
            item.article_name,
            item.payment_id,
        )
        return item
