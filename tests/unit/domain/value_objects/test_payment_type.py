import pytest

from cashdesk_payments.domain.exceptions import InvalidPaymentTypeError
from cashdesk_payments.domain.value_objects import PaymentType


class TestPaymentTypeValues:
    def test_all_payment_types_exist(self) -> None:
        assert {t.value for t in PaymentType} == {"Cash", "CreditCard"}


class TestPaymentTypeParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Cash", PaymentType.CASH),
            ("CreditCard", PaymentType.CREDIT_CARD),
            ("cash", PaymentType.CASH),
            ("creditcard", PaymentType.CREDIT_CARD),
            ("CREDIT_CARD", PaymentType.CREDIT_CARD),
            ("  Cash  ", PaymentType.CASH),
        ],
    )
    def test_parse_accepts_known_types(self, text: str, expected: PaymentType) -> None:
        assert PaymentType.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "Check", "Credit Card", "Bitcoin"])
    def test_parse_rejects_unknown_types(self, text: str) -> None:
        with pytest.raises(InvalidPaymentTypeError):
            PaymentType.parse(text)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid payment type"):
            PaymentType.parse("Voucher")
