"""Value objects - Immutable objects defined by their attributes."""

from cashdesk_payments.domain.value_objects.employee_role import EmployeeRole
from cashdesk_payments.domain.value_objects.payment_type import PaymentType

__all__ = [
    "EmployeeRole",
    "PaymentType",
]
