from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollReport:
    """Net-pay report for one employee. Values are unrounded floats."""

    employee_id: str
    name: str
    code: str
    department: str
    total_hours: float
    overtime_hours: float
    overtime_pay: float
    base_salary: float
    bonus: float
    penalty: float
    loan_repayment: float
    total_adjustments: float
    net_pay: float

    @property
    def allowances(self) -> float:
        return self.bonus

    @property
    def deductions(self) -> float:
        return self.penalty + self.loan_repayment

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "code": self.code,
            "department": self.department,
            "totalHours": self.total_hours,
            "overtimeHours": self.overtime_hours,
            "overtimePay": self.overtime_pay,
            "baseSalary": self.base_salary,
            "bonus": self.bonus,
            "penalty": self.penalty,
            "loanRepayment": self.loan_repayment,
            "allowances": self.allowances,
            "deductions": self.deductions,
            "totalAdjustments": self.total_adjustments,
            "netPay": self.net_pay,
        }
