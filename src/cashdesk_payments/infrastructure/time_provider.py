from datetime import UTC, datetime

from cashdesk_payments.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test clock returning a controllable timestamp.

    NOT thread-safe; set_time() is meant for single-threaded tests.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_utc(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Move the clock, e.g. to confirm a payment on a later day."""
        self._validate_utc(new_time)
        self._fixed_time = new_time

    def _validate_utc(self, dt: datetime) -> None:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
