from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from cashdesk_payments.application.ports import UnitOfWork
from cashdesk_payments.domain.exceptions import IntegrityConflictError
from cashdesk_payments.infrastructure.sql.models import Base
from cashdesk_payments.infrastructure.sql.repositories import (
    SqlCashDeskRepository,
    SqlEmployeeRepository,
    SqlPaymentItemRepository,
    SqlPaymentRepository,
)

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def create_store_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the payment store.

    For SQLite, foreign keys are switched on per connection; without that
    pragma SQLite ignores the item → payment reference.
    """
    engine = create_engine(database_url, echo=echo)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create missing tables and indexes. Existing tables are left untouched."""
    Base.metadata.create_all(engine)
    logger.debug("Payment store schema ready on %s", engine.url.render_as_string())


class SqlUnitOfWork(UnitOfWork):
    """Unit of work backed by one SQLAlchemy session (one transaction)."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlUnitOfWork:
        self._session = self._session_factory()
        self.cash_desks = SqlCashDeskRepository(self._session)
        self.employees = SqlEmployeeRepository(self._session)
        self.payments = SqlPaymentRepository(self._session)
        self.payment_items = SqlPaymentItemRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            if self._session is not None:
                self._session.close()
            self._session = None

    def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("Unit of work not entered")
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            raise IntegrityConflictError(str(e.orig)) from e

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()


class SqlUnitOfWorkFactory:
    """Callable producing units of work over one engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    def __call__(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self._session_factory)
