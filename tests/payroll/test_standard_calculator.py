from dataclasses import replace
from datetime import datetime

import pytest

from attendflow.attendance.model import AttendanceRecord
from attendflow.core.enums import AttendanceStatus, EmployeeStatus
from attendflow.payroll.calculator.standard_calculator import StandardPayrollCalculator, calculate_payroll


def _shift(att_id, check_in, check_out, employee_id="emp-1", status=AttendanceStatus.PRESENT):
    return AttendanceRecord(
        attendance_id=att_id,
        employee_id=employee_id,
        location_id="loc-1",
        check_in_time=check_in,
        check_out_time=check_out,
        status=status,
    )


def test_ten_hour_shift_pays_two_overtime_hours(john):
    records = [_shift("a", datetime(2026, 2, 2, 8, 0), datetime(2026, 2, 2, 18, 0))]

    report = StandardPayrollCalculator().calculate(john, records)

    assert report.total_hours == 10.0
    assert report.overtime_hours == 2.0
    assert report.overtime_pay == 66.0
    assert report.total_adjustments == 200.0
    assert report.net_pay == 3766.0


def test_inactive_employee_has_no_report(john):
    inactive = replace(john, status=EmployeeStatus.INACTIVE)
    records = [_shift("a", datetime(2026, 2, 2, 8, 0), datetime(2026, 2, 2, 20, 0))]

    assert calculate_payroll(inactive, records) is None
    assert calculate_payroll(inactive, []) is None


def test_only_closed_records_of_the_employee_count(john):
    records = [
        _shift("a", datetime(2026, 2, 2, 9, 0), datetime(2026, 2, 2, 17, 0)),
        _shift("open", datetime(2026, 2, 3, 9, 0), None),
        _shift("absent", None, None, status=AttendanceStatus.ABSENT),
        _shift("other", datetime(2026, 2, 2, 6, 0), datetime(2026, 2, 2, 22, 0), employee_id="emp-2"),
    ]

    report = calculate_payroll(john, records)

    assert report.total_hours == 8.0
    assert report.overtime_hours == 0.0
    assert report.net_pay == 3700.0


def test_deductions_and_unrounded_arithmetic(john):
    emp = replace(john, penalty=100.0, loan_repayment=250.0, bonus=50.0, hourly_rate=17.0, ot_multiplier=1.25)
    records = [_shift("a", datetime(2026, 2, 2, 8, 0), datetime(2026, 2, 2, 16, 20))]

    report = calculate_payroll(emp, records)

    assert report.overtime_hours == pytest.approx(1 / 3)
    assert report.overtime_pay == pytest.approx(17.0 * 1.25 / 3)
    assert report.total_adjustments == -300.0
    assert report.deductions == 350.0
    assert report.allowances == 50.0
    assert report.net_pay == pytest.approx(3500 + 17.0 * 1.25 / 3 - 300)
