"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from cashdesk_payments.application.ports.lock_provider import LockProvider
from cashdesk_payments.application.ports.repositories import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentItemRepository,
    PaymentRepository,
)
from cashdesk_payments.application.ports.time_provider import TimeProvider
from cashdesk_payments.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CashDeskRepository",
    "EmployeeRepository",
    "LockProvider",
    "PaymentItemRepository",
    "PaymentRepository",
    "TimeProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
