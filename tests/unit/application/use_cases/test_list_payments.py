"""Tests for ListPaymentsUseCase."""

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from cashdesk_payments.application.dtos import PaymentFilter
from cashdesk_payments.application.use_cases import ListPaymentsUseCase
from cashdesk_payments.domain.entities import Payment
from cashdesk_payments.domain.exceptions import PaymentNotFoundError
from cashdesk_payments.infrastructure.in_memory import InMemoryUnitOfWorkFactory


@pytest.fixture
def use_case(uow_factory: InMemoryUnitOfWorkFactory) -> ListPaymentsUseCase:
    return ListPaymentsUseCase(uow_factory=uow_factory)


@pytest.fixture
def three_payments(
    seed: Callable[..., None], make_payment: Callable[..., Payment]
) -> None:
    seed(
        make_payment(
            1,
            datetime(2024, 5, 12, 9, 0, tzinfo=UTC),
            confirmed=datetime(2024, 5, 12, 9, 5, tzinfo=UTC),
        ),
        make_payment(2, datetime(2024, 5, 13, 10, 0, tzinfo=UTC)),
        make_payment(1, datetime(2024, 5, 14, 11, 0, tzinfo=UTC)),
    )


class TestListPayments:
    @pytest.mark.usefixtures("three_payments")
    def test_no_filter_returns_all_ascending_by_id(self, use_case: ListPaymentsUseCase) -> None:
        payments = use_case.execute(PaymentFilter())

        assert [p.id for p in payments] == [1, 2, 3]

    @pytest.mark.usefixtures("three_payments")
    def test_filter_by_cash_desk(self, use_case: ListPaymentsUseCase) -> None:
        payments = use_case.execute(PaymentFilter(cash_desk_number=1))

        assert [p.id for p in payments] == [1, 3]

    @pytest.mark.usefixtures("three_payments")
    def test_filter_by_date_from(self, use_case: ListPaymentsUseCase) -> None:
        payments = use_case.execute(PaymentFilter(date_from=date(2024, 5, 13)))

        assert [p.id for p in payments] == [2, 3]

    @pytest.mark.usefixtures("three_payments")
    def test_filters_combine(self, use_case: ListPaymentsUseCase) -> None:
        payments = use_case.execute(PaymentFilter(cash_desk_number=1, date_from=date(2024, 5, 13)))

        assert [p.id for p in payments] == [3]

    @pytest.mark.usefixtures("three_payments")
    def test_unknown_cash_desk_returns_empty(self, use_case: ListPaymentsUseCase) -> None:
        assert use_case.execute(PaymentFilter(cash_desk_number=99)) == []

    def test_empty_store_returns_empty(
        self, use_case: ListPaymentsUseCase, seed: Callable[..., None]
    ) -> None:
        seed()

        assert use_case.execute(PaymentFilter()) == []

    def test_date_from_ignores_time_of_day(
        self,
        use_case: ListPaymentsUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
    ) -> None:
        seed(make_payment(1, datetime(2024, 5, 13, 0, 0, tzinfo=UTC)))

        assert len(use_case.execute(PaymentFilter(date_from=date(2024, 5, 13)))) == 1
        assert use_case.execute(PaymentFilter(date_from=date(2024, 5, 14))) == []

    def test_date_from_compares_utc_date(
        self,
        use_case: ListPaymentsUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
    ) -> None:
        """23:30 on May 12 at UTC-2 is May 13 in UTC."""
        local = timezone(-timedelta(hours=2))
        seed(make_payment(1, datetime(2024, 5, 12, 23, 30, tzinfo=local)))

        assert len(use_case.execute(PaymentFilter(date_from=date(2024, 5, 13)))) == 1


    @pytest.mark.usefixtures("three_payments")
    def test_date_from_given_as_datetime(self, use_case: ListPaymentsUseCase) -> None:
        payments = use_case.execute(
            PaymentFilter(date_from=datetime(2024, 5, 13, 23, 0, tzinfo=UTC))
        )

        assert [p.id for p in payments] == [2, 3]


class TestGetPayment:
    @pytest.mark.usefixtures("three_payments")
    def test_get_returns_payment(self, use_case: ListPaymentsUseCase) -> None:
        payment = use_case.get(2)

        assert payment.cash_desk_number == 2
        assert payment.confirmed is None

    @pytest.mark.usefixtures("three_payments")
    def test_get_missing_raises(self, use_case: ListPaymentsUseCase) -> None:
        with pytest.raises(PaymentNotFoundError):
            use_case.get(99)

    @pytest.mark.usefixtures("three_payments")
    def test_items_of_payment_without_items(self, use_case: ListPaymentsUseCase) -> None:
        assert use_case.items(1) == []

    @pytest.mark.usefixtures("three_payments")
    def test_items_of_missing_payment_raises(self, use_case: ListPaymentsUseCase) -> None:
        with pytest.raises(PaymentNotFoundError):
            use_case.items(99)
