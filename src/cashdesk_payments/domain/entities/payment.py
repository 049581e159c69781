"""Payment entity with open/confirmed lifecycle.

A payment is opened at a cash desk by an employee, collects items while
open, and is frozen once confirmed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from cashdesk_payments.domain.exceptions import InvalidStateTransitionError

if TYPE_CHECKING:
    from datetime import datetime

    from cashdesk_payments.domain.value_objects import PaymentType


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment entity with state machine behavior.

    Payment is immutable (frozen dataclass). All state-changing methods
    return a new Payment instance.

    The cash desk and the employee are referenced by their identifiers
    only; the payment owns neither.

    State machine:
        - open (confirmed is None) → confirmed (confirm)
        - confirmed is terminal for mutation; deletion is allowed
          from both states and is not a transition
    """

    id: int | None
    cash_desk_number: int
    employee_registration_number: int
    payment_type: PaymentType
    payment_date_time: datetime
    confirmed: datetime | None

    @classmethod
    def open(
        cls,
        cash_desk_number: int,
        employee_registration_number: int,
        payment_type: PaymentType,
        now: datetime,
    ) -> Payment:
        """Factory method for a new, not yet persisted, open payment.

        The store assigns the id when the payment is added.
        """
        return cls(
            id=None,
            cash_desk_number=cash_desk_number,
            employee_registration_number=employee_registration_number,
            payment_type=payment_type,
            payment_date_time=now,
            confirmed=None,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed is not None

    def confirm(self, now: datetime) -> Payment:
        """Close the payment.

        Args:
            now: Current timestamp (UTC).

        Returns:
            New Payment instance with the confirmation timestamp set.

        Raises:
            InvalidStateTransitionError: If the payment is already confirmed.
        """
        if self.is_confirmed:
            raise InvalidStateTransitionError(
                f"Cannot confirm payment {self.id}; it was confirmed at {self.confirmed}"
            )

        return replace(self, confirmed=now)
