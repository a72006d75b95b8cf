from __future__ import annotations

import csv
import io
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import PAYROLL_CSV_HEADER
from ..core.enums import EmployeeStatus
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollReport


def _money(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class PayrollService:
    """Payroll for active employees, and the CSV export built from it."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def report_for(self, employee_id: str) -> Optional[PayrollReport]:
        """None for unknown or inactive employees ("not applicable")."""
        employee = self._employees.get_employee(employee_id)
        if not employee:
            return None
        return self._calculator.calculate(employee, self._attendance.get_records_for_employee(employee_id))

    def reports(self) -> list[PayrollReport]:
        out = []
        for emp in self._employees.list_employees():
            if not emp.is_active:
                continue
            report = self._calculator.calculate(emp, self._attendance.get_records_for_employee(emp.employee_id))
            if report is not None:
                out.append(report)
        return out

    def totals(self) -> dict:
        reports = self.reports()
        return {
            "employees": len(reports),
            "totalHours": sum(r.total_hours for r in reports),
            "overtimeHours": sum(r.overtime_hours for r in reports),
            "overtimePay": sum(r.overtime_pay for r in reports),
            "netPay": sum(r.net_pay for r in reports),
        }

    def export_csv(self) -> str:
        """One row per active employee; rounding happens here only."""
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(PAYROLL_CSV_HEADER)
        for r in self.reports():
            writer.writerow(
                [
                    r.name,
                    r.code,
                    r.department,
                    EmployeeStatus.ACTIVE.value,
                    _money(r.base_salary),
                    _money(r.bonus),
                    _money(r.penalty),
                    _money(r.loan_repayment),
                    f"{r.overtime_hours:.1f}",
                    f"{r.net_pay:.2f}",
                ]
            )
        return out.getvalue()
