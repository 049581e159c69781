from __future__ import annotations

from enum import Enum

from cashdesk_payments.domain.exceptions import InvalidPaymentTypeError


class PaymentType(Enum):
    """Payment method tag of a payment."""

    CASH = "Cash"
    CREDIT_CARD = "CreditCard"

    @classmethod
    def parse(cls, text: str) -> PaymentType:
        """Parse a payment type from its text form.

        Matches the tag value ("Cash", "CreditCard") or the member name
        ("CASH", "CREDIT_CARD"), case-insensitively, after trimming whitespace.

        Raises:
            InvalidPaymentTypeError: If the text names no payment type.
        """
        normalized = (text or "").strip().lower()
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        raise InvalidPaymentTypeError(f"Invalid payment type: {text!r}")
