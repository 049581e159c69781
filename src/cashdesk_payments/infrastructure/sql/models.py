"""ORM tables of the relational store.

Rows are mapped to and from domain entities by the repositories; the
domain layer never sees these classes.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator[datetime]):
    """Stores UTC timestamps naive and hands them back with tzinfo=UTC.

    SQLite keeps no offset, so the UTC contract of TimeProvider is
    re-applied on load.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError(f"naive datetime cannot be stored: {value!r}")
        return value.astimezone(UTC).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        return value.replace(tzinfo=UTC)


class DecimalText(TypeDecorator[Decimal]):
    """Stores a Decimal as its exact text form, every digit preserved.

    SQLite has no decimal type of its own.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value: Decimal | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> Decimal | None:
        if value is None:
            return None
        return Decimal(value)


class Base(DeclarativeBase):
    pass


class CashDeskRow(Base):
    __tablename__ = "cash_desks"

    number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


class EmployeeRow(Base):
    __tablename__ = "employees"

    registration_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)


class PaymentRow(Base):
    __tablename__ = "payments"
    __table_args__ = (
        # One payment without confirmation per cash desk
        Index(
            "ux_payments_open_per_cash_desk",
            "cash_desk_number",
            unique=True,
            sqlite_where=text("confirmed IS NULL"),
            postgresql_where=text("confirmed IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cash_desk_number: Mapped[int] = mapped_column(
        ForeignKey("cash_desks.number"), nullable=False, index=True
    )
    employee_registration_number: Mapped[int] = mapped_column(
        ForeignKey("employees.registration_number"), nullable=False
    )
    payment_type: Mapped[str] = mapped_column(String(16), nullable=False)
    payment_date_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    confirmed: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)


class PaymentItemRow(Base):
    __tablename__ = "payment_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    article_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(DecimalText(), nullable=False)
    payment_id: Mapped[int] = mapped_column(
        ForeignKey("payments.id", ondelete="RESTRICT"), nullable=False, index=True
    )
