import pytest

from cashdesk_payments.domain.entities import Employee
from cashdesk_payments.domain.value_objects import EmployeeRole


class TestEmployeeRole:
    def test_role_values(self) -> None:
        assert {r.value for r in EmployeeRole} == {"Cashier", "Manager"}

    def test_manager_is_manager(self) -> None:
        employee = Employee(
            registration_number=2001, first_name="Anna", last_name="Huber", role=EmployeeRole.MANAGER
        )

        assert employee.is_manager is True

    def test_cashier_is_not_manager(self) -> None:
        employee = Employee(
            registration_number=1001, first_name="Max", last_name="Muster", role=EmployeeRole.CASHIER
        )

        assert employee.is_manager is False

    def test_employee_is_frozen(self) -> None:
        employee = Employee(
            registration_number=1001, first_name="Max", last_name="Muster", role=EmployeeRole.CASHIER
        )

        with pytest.raises(AttributeError):
            employee.role = EmployeeRole.MANAGER  # type: ignore[misc]
