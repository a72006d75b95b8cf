from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    There is no delete: employees are only deactivated.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def add_employee(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def append_employees(self, batch: Sequence[Employee]) -> int:
        raise NotImplementedError

    def update_employee(self, employee: Employee) -> bool:
        raise NotImplementedError
