from datetime import datetime

from attendflow.attendance.classifier import classify_check_in, classify_completed, overtime_hours
from attendflow.attendance.factory import AttendanceStrategyFactory
from attendflow.attendance.model import AttendanceRecord
from attendflow.attendance.strategies.late_strategy import LateStrategy
from attendflow.attendance.strategies.overtime_strategy import OvertimeStrategy
from attendflow.attendance.strategies.present_strategy import PresentStrategy
from attendflow.core.enums import AttendanceStatus


def _record(check_in, check_out, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(
        attendance_id="att-1",
        employee_id="emp-1",
        location_id="loc-1",
        check_in_time=check_in,
        check_out_time=check_out,
        status=status,
    )


def test_factory_checkin_hour_nine_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2026, 2, 2, 9, 59, 59))

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_hour_ten_is_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2026, 2, 2, 10, 0, 0))

    assert isinstance(strategy, LateStrategy)


def test_classify_check_in_boundary():
    assert classify_check_in(datetime(2026, 2, 2, 0, 5)) == AttendanceStatus.PRESENT
    assert classify_check_in(datetime(2026, 2, 2, 9, 0)) == AttendanceStatus.PRESENT
    assert classify_check_in(datetime(2026, 2, 2, 10, 0)) == AttendanceStatus.LATE
    assert classify_check_in(datetime(2026, 2, 2, 23, 0)) == AttendanceStatus.LATE


def test_completed_shift_over_eight_hours_is_overtime():
    rec = _record(datetime(2026, 2, 2, 8, 0), datetime(2026, 2, 2, 18, 30))

    factory = AttendanceStrategyFactory()
    assert isinstance(factory.for_completed(record=rec), OvertimeStrategy)
    assert classify_completed(rec) == AttendanceStatus.OVERTIME
    assert overtime_hours(rec) == 2.5
    # stored status is untouched
    assert rec.status == AttendanceStatus.PRESENT


def test_exactly_eight_hours_keeps_stored_status():
    rec = _record(datetime(2026, 2, 2, 10, 0), datetime(2026, 2, 2, 18, 0), AttendanceStatus.LATE)

    assert classify_completed(rec) == AttendanceStatus.LATE
    assert overtime_hours(rec) == 0.0


def test_open_record_has_no_overtime():
    rec = _record(datetime(2026, 2, 2, 8, 0), None)

    assert classify_completed(rec) == AttendanceStatus.PRESENT
    assert overtime_hours(rec) == 0.0
