"""Tests for AddPaymentItemUseCase."""

from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from cashdesk_payments.application.dtos import NewPaymentItemCommand
from cashdesk_payments.application.use_cases import AddPaymentItemUseCase
from cashdesk_payments.domain.entities import Payment
from cashdesk_payments.domain.exceptions import (
    InvalidAmountError,
    InvalidArticleNameError,
    PaymentAlreadyConfirmedError,
    PaymentNotFoundError,
)
from cashdesk_payments.infrastructure.in_memory import InMemoryUnitOfWorkFactory
from cashdesk_payments.infrastructure.lock_provider import NoOpLockProvider


@pytest.fixture
def use_case(
    lock_provider: NoOpLockProvider, uow_factory: InMemoryUnitOfWorkFactory
) -> AddPaymentItemUseCase:
    return AddPaymentItemUseCase(lock_provider=lock_provider, uow_factory=uow_factory)


def _command(
    payment_id: int = 1,
    article_name: str = "Cola",
    amount: int = 2,
    price: Decimal = Decimal("2.5"),
) -> NewPaymentItemCommand:
    return NewPaymentItemCommand(
        article_name=article_name, amount=amount, price=price, payment_id=payment_id
    )


class TestAddPaymentItemSuccess:
    def test_add_item_to_open_payment(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        now: datetime,
    ) -> None:
        seed(make_payment(1, now))

        item = use_case.execute(_command())

        assert item.id == 1
        assert item.payment_id == 1
        assert item.article_name == "Cola"
        assert item.amount == 2
        assert item.price == Decimal("2.5")

    def test_items_are_listed_for_their_payment(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        uow_factory: InMemoryUnitOfWorkFactory,
        now: datetime,
    ) -> None:
        seed(make_payment(1, now), make_payment(2, now))

        use_case.execute(_command(payment_id=1, article_name="Cola"))
        use_case.execute(_command(payment_id=2, article_name="Water"))
        use_case.execute(_command(payment_id=1, article_name="Hot-Dog"))

        with uow_factory() as uow:
            names = [i.article_name for i in uow.payment_items.list_for_payment(1)]
        assert names == ["Cola", "Hot-Dog"]

    def test_add_item_leaves_payment_open(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        uow_factory: InMemoryUnitOfWorkFactory,
        now: datetime,
    ) -> None:
        seed(make_payment(1, now))

        use_case.execute(_command())

        with uow_factory() as uow:
            assert uow.payments.get(1).confirmed is None


class TestAddPaymentItemValidation:
    def test_payment_not_found_raises(
        self, use_case: AddPaymentItemUseCase, seed: Callable[..., None]
    ) -> None:
        seed()

        with pytest.raises(PaymentNotFoundError):
            use_case.execute(_command(payment_id=42))

    def test_confirmed_payment_raises(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        uow_factory: InMemoryUnitOfWorkFactory,
        now: datetime,
    ) -> None:
        seed(make_payment(1, now - timedelta(hours=1), confirmed=now))

        with pytest.raises(PaymentAlreadyConfirmedError, match="Payment already confirmed."):
            use_case.execute(_command())

        assert uow_factory.store.payment_items == {}

    def test_zero_amount_raises(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        now: datetime,
    ) -> None:
        seed(make_payment(1, now))

        with pytest.raises(InvalidAmountError):
            use_case.execute(_command(amount=0))

    def test_blank_article_name_raises(
        self,
        use_case: AddPaymentItemUseCase,
        seed: Callable[..., None],
        make_payment: Callable[..., Payment],
        now: datetime,
    ) -> None:
        seed(make_payment(1, now))

        with pytest.raises(InvalidArticleNameError):
            use_case.execute(_command(article_name=" "))

    def test_not_found_wins_over_invalid_item(
        self, use_case: AddPaymentItemUseCase, seed: Callable[..., None]
    ) -> None:
        seed()

        with pytest.raises(PaymentNotFoundError):
            use_case.execute(_command(payment_id=42, amount=0))
