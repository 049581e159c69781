"""Commands and filters handed in by the HTTP collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import Decimal

from cashdesk_payments.domain.value_objects import PaymentType


@dataclass(frozen=True)
class NewPaymentCommand:
    """Request to open a payment, as received from the API.

    payment_date_time is the client-side timestamp. The service stamps
    the payment with its own clock instead.
    """

    cash_desk_number: int
    payment_date_time: datetime | None
    payment_type_text: str
    employee_registration_number: int

    @property
    def payment_type(self) -> PaymentType:
        """Parsed payment type; raises InvalidPaymentTypeError when unparsable."""
        return PaymentType.parse(self.payment_type_text)


@dataclass(frozen=True)
class NewPaymentItemCommand:
    """Request to add an item to an open payment."""

    article_name: str
    amount: int
    price: Decimal
    payment_id: int


@dataclass(frozen=True)
class PaymentFilter:
    """Optional restrictions for listing payments.

    date_from is an inclusive lower bound on the UTC date of
    payment_date_time; the time of day is ignored. A datetime passed as
    date_from is reduced to its UTC date (naive values are taken as UTC).
    """

    cash_desk_number: int | None = None
    date_from: date | None = None

    def __post_init__(self) -> None:
        if isinstance(self.date_from, datetime):
            moment = self.date_from
            if moment.tzinfo is not None:
                moment = moment.astimezone(UTC)
            object.__setattr__(self, "date_from", moment.date())

    @property
    def date_from_start(self) -> datetime | None:
        """Earliest payment_date_time accepted by date_from (midnight UTC)."""
        if self.date_from is None:
            return None
        return datetime.combine(self.date_from, time.min, tzinfo=UTC)

    def matches(self, payment_cash_desk: int, payment_date_time: datetime) -> bool:
        if self.cash_desk_number is not None and payment_cash_desk != self.cash_desk_number:
            return False
        if self.date_from is not None:
            return payment_date_time.astimezone(UTC).date() >= self.date_from
        return True
