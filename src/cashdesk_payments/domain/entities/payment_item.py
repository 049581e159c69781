from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from cashdesk_payments.domain.exceptions import InvalidAmountError, InvalidArticleNameError


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One line of a payment: article, quantity and unit price.

    Owned by exactly one payment and removed together with it.
    Use the create() factory method to construct instances with validation.
    """

    id: int | None
    payment_id: int
    article_name: str
    amount: int
    price: Decimal

    @classmethod
    def create(
        cls,
        payment_id: int,
        article_name: str,
        amount: int,
        price: Decimal,
    ) -> PaymentItem:
        """Factory method to create a PaymentItem with validation.

        Args:
            payment_id: The owning payment.
            article_name: Name of the article sold.
            amount: Quantity sold.
            price: Unit price.

        Returns:
            A new, not yet persisted, PaymentItem instance.

        Raises:
            InvalidArticleNameError: If article_name is blank.
            InvalidAmountError: If amount <= 0.
        """
        if not article_name or not article_name.strip():
            raise InvalidArticleNameError("Article name cannot be empty")

        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmountError(f"Amount must be a positive integer, got {amount!r}")

        return cls(
            id=None,
            payment_id=payment_id,
            article_name=article_name.strip(),
            amount=amount,
            price=price if isinstance(price, Decimal) else Decimal(str(price)),
        )
