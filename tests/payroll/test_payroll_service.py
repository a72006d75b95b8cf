import csv
import io

from attendflow.core.constants import PAYROLL_CSV_HEADER

ACTIVE_CODES = ["EMP001", "EMP002", "EMP005", "EMP006", "EMP007", "EMP008", "EMP009", "EMP010"]


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_reports_cover_exactly_the_active_employees(payroll_service):
    reports = payroll_service.reports()

    assert [r.code for r in reports] == ACTIVE_CODES


def test_report_for_inactive_or_unknown_is_none(payroll_service):
    assert payroll_service.report_for("emp-3") is None
    assert payroll_service.report_for("emp-404") is None


def test_demo_payroll_values(payroll_service):
    john = payroll_service.report_for("emp-1")
    elena = payroll_service.report_for("emp-6")

    # 5 x 9h shifts
    assert john.total_hours == 45.0
    assert john.overtime_hours == 5.0
    assert john.net_pay == 3500 + 5 * 22 * 1.5 + 200
    # 18:00 to 04:00 night shifts
    assert elena.overtime_hours == 10.0
    assert elena.net_pay == 2900 + 10 * 19 * 1.5 + 100


def test_export_csv_rows_follow_active_iteration(payroll_service):
    rows = _rows(payroll_service.export_csv())

    assert rows[0] == PAYROLL_CSV_HEADER
    assert [r[1] for r in rows[1:]] == ACTIVE_CODES
    assert rows[1] == ["John Doe", "EMP001", "Engineering", "ACTIVE", "3500", "200", "0", "0", "5.0", "3865.00"]


def test_export_drops_employee_after_deactivation(payroll_service, demo_ledger):
    from dataclasses import replace

    from attendflow.core.enums import EmployeeStatus

    demo_ledger.update_employee(replace(demo_ledger.get_employee("emp-7"), status=EmployeeStatus.INACTIVE))

    codes = [r[1] for r in _rows(payroll_service.export_csv())[1:]]
    assert "EMP007" not in codes
    assert len(codes) == len(ACTIVE_CODES) - 1


def test_totals(payroll_service):
    totals = payroll_service.totals()

    assert totals["employees"] == len(ACTIVE_CODES)
    assert totals["netPay"] == sum(r.net_pay for r in payroll_service.reports())
