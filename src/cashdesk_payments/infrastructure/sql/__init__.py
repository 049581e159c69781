"""Relational store adapter (SQLAlchemy ORM, SQLite by default)."""

from cashdesk_payments.infrastructure.sql.unit_of_work import (
    SqlUnitOfWork,
    SqlUnitOfWorkFactory,
    create_schema,
    create_store_engine,
)

__all__ = [
    "SqlUnitOfWork",
    "SqlUnitOfWorkFactory",
    "create_schema",
    "create_store_engine",
]
