"""Composition root: builds a PaymentLifecycleService from Settings."""

from __future__ import annotations

from cashdesk_payments.application.ports import UnitOfWorkFactory
from cashdesk_payments.application.service import PaymentLifecycleService
from cashdesk_payments.config import Settings
from cashdesk_payments.infrastructure import (
    InMemoryLockProvider,
    InMemoryUnitOfWorkFactory,
    SystemTimeProvider,
)
from cashdesk_payments.infrastructure.sql import (
    SqlUnitOfWorkFactory,
    create_schema,
    create_store_engine,
)
from cashdesk_payments.logger import setup_logger


def build_uow_factory(settings: Settings) -> UnitOfWorkFactory:
    """Create the store selected by settings.store_backend."""
    if settings.store_backend == "memory":
        return InMemoryUnitOfWorkFactory()

    engine = create_store_engine(settings.database_url, echo=settings.sql_echo)
    create_schema(engine)
    return SqlUnitOfWorkFactory(engine)


def build_payment_service(settings: Settings | None = None) -> PaymentLifecycleService:
    settings = settings or Settings()
    logger = setup_logger(settings.log_level)

    service = PaymentLifecycleService(
        lock_provider=InMemoryLockProvider(),
        time_provider=SystemTimeProvider(),
        uow_factory=build_uow_factory(settings),
    )
    logger.info("Payment service ready (store=%s)", settings.store_backend)
    return service
