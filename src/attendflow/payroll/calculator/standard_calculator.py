from __future__ import annotations

from typing import Iterable, Optional

from .base import PayrollCalculator
from ...attendance.model import AttendanceRecord
from ...core.constants import STANDARD_SHIFT_HOURS
from ...employees.model import Employee
from ..model import PayrollReport


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base salary + overtime pay + bonus - (penalty + loan).

    Every closed shift counts fully towards total hours; the part beyond
    8 hours is paid at hourly_rate * ot_multiplier. Inactive employees get no
    report.
    """

    def __init__(self, standard_shift_hours: float = STANDARD_SHIFT_HOURS):
        self._standard_hours = standard_shift_hours

    def calculate(self, employee: Employee, records: Iterable[AttendanceRecord]) -> Optional[PayrollReport]:
        if not employee.is_active:
            return None

        total_hours = 0.0
        overtime_hours = 0.0
        for rec in records:
            if rec.employee_id != employee.employee_id or not rec.is_closed:
                continue
            hours = rec.duration_hours
            total_hours += hours
            if hours > self._standard_hours:
                overtime_hours += hours - self._standard_hours

        overtime_pay = overtime_hours * employee.hourly_rate * employee.ot_multiplier
        total_adjustments = employee.bonus - (employee.penalty + employee.loan_repayment)
        net_pay = employee.base_salary + overtime_pay + total_adjustments

        return PayrollReport(
            employee_id=employee.employee_id,
            name=employee.name,
            code=employee.code,
            department=employee.department,
            total_hours=total_hours,
            overtime_hours=overtime_hours,
            overtime_pay=overtime_pay,
            base_salary=employee.base_salary,
            bonus=employee.bonus,
            penalty=employee.penalty,
            loan_repayment=employee.loan_repayment,
            total_adjustments=total_adjustments,
            net_pay=net_pay,
        )


def calculate_payroll(employee: Employee, records: Iterable[AttendanceRecord]) -> Optional[PayrollReport]:
    return StandardPayrollCalculator().calculate(employee, records)
