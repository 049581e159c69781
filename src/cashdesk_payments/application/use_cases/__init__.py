"""Use cases - One class per payment lifecycle operation."""

from cashdesk_payments.application.use_cases.add_payment_item import AddPaymentItemUseCase
from cashdesk_payments.application.use_cases.confirm_payment import ConfirmPaymentUseCase
from cashdesk_payments.application.use_cases.delete_payment import DeletePaymentUseCase
from cashdesk_payments.application.use_cases.list_payments import ListPaymentsUseCase
from cashdesk_payments.application.use_cases.open_payment import (
    OpenPaymentRequest,
    OpenPaymentUseCase,
)

__all__ = [
    "AddPaymentItemUseCase",
    "ConfirmPaymentUseCase",
    "DeletePaymentUseCase",
    "ListPaymentsUseCase",
    "OpenPaymentRequest",
    "OpenPaymentUseCase",
]
