"""Domain entities - Objects with identity and lifecycle."""

from cashdesk_payments.domain.entities.cash_desk import CashDesk
from cashdesk_payments.domain.entities.employee import Employee
from cashdesk_payments.domain.entities.payment import Payment
from cashdesk_payments.domain.entities.payment_item import PaymentItem

__all__ = [
    "CashDesk",
    "Employee",
    "Payment",
    "PaymentItem",
]
