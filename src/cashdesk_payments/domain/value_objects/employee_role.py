from enum import Enum


class EmployeeRole(Enum):
    """Role tag distinguishing the employee variants."""

    CASHIER = "Cashier"
    MANAGER = "Manager"
