from datetime import datetime

import pytest

from attendflow.attendance.model import AttendanceRecord
from attendflow.core.enums import AttendanceStatus
from attendflow.core.exceptions import ValidationError


def _record(att_id, check_in):
    return AttendanceRecord(
        attendance_id=att_id,
        employee_id="emp-1",
        location_id="loc-1",
        check_in_time=check_in,
        check_out_time=None,
        status=AttendanceStatus.PRESENT,
    )


def test_location_ids_are_unique(ledger, office):
    with pytest.raises(ValidationError):
        ledger.add_location(office)


def test_records_are_inserted_newest_first(ledger):
    ledger.insert_record(_record("a", datetime(2026, 2, 1, 9, 0)))
    ledger.insert_record(_record("b", datetime(2026, 2, 2, 9, 0)))

    assert [r.attendance_id for r in ledger.list_records()] == ["b", "a"]


def test_closed_record_cannot_be_closed_again(ledger):
    ledger.insert_record(_record("a", datetime(2026, 2, 1, 9, 0)))

    assert ledger.close_record("a", datetime(2026, 2, 1, 17, 0)) is True
    assert ledger.close_record("a", datetime(2026, 2, 1, 18, 0)) is False
    assert ledger.list_records()[0].check_out_time == datetime(2026, 2, 1, 17, 0)


def test_open_record_lookup_is_per_day(ledger):
    ledger.insert_record(_record("a", datetime(2026, 2, 1, 9, 0)))

    assert ledger.get_open_record("emp-1", datetime(2026, 2, 1).date()).attendance_id == "a"
    assert ledger.get_open_record("emp-1", datetime(2026, 2, 2).date()) is None


def test_demo_data_respects_record_invariants(demo_ledger):
    records = demo_ledger.list_records()

    assert len(records) == 50
    for r in records:
        if r.status == AttendanceStatus.ABSENT:
            assert r.check_in_time is None and r.check_out_time is None
        else:
            assert r.check_out_time >= r.check_in_time
    assert sum(1 for r in records if r.status == AttendanceStatus.ABSENT) == 4


def test_append_rejects_existing_employee_id(ledger, john):
    with pytest.raises(ValidationError):
        ledger.append_employees([john])

    assert len(ledger.list_employees()) == 1
