from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_OT_MULTIPLIER
from ..core.enums import EmployeeStatus, Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a tracked person and their compensation fields.

    Note: plain data object, no store access.
    """

    employee_id: str
    name: str
    code: str
    role: Role
    location_id: str
    department: str
    base_salary: float
    hourly_rate: float
    ot_multiplier: float = DEFAULT_OT_MULTIPLIER
    penalty: float = 0.0
    loan_repayment: float = 0.0
    bonus: float = 0.0
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    onboarded: bool = False
    avatar: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "employeeId": self.code,
            "role": self.role.value,
            "locationId": self.location_id,
            "department": self.department,
            "baseSalary": self.base_salary,
            "hourlyRate": self.hourly_rate,
            "otMultiplier": self.ot_multiplier,
            "penalty": self.penalty,
            "loanRepayment": self.loan_repayment,
            "bonus": self.bonus,
            "status": self.status.value,
            "onboarded": self.onboarded,
            "avatar": self.avatar,
        }
