from __future__ import annotations

from dataclasses import dataclass

from cashdesk_payments.domain.value_objects import EmployeeRole


@dataclass(frozen=True, slots=True)
class Employee:
    """Employee entity, a tagged variant over cashiers and managers.

    The role tag replaces a Cashier/Manager class hierarchy; authorization
    checks compare against the tag only.
    """

    registration_number: int
    first_name: str
    last_name: str
    role: EmployeeRole

    @property
    def is_manager(self) -> bool:
        return self.role == EmployeeRole.MANAGER
