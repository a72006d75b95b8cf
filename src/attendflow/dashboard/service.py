from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.classifier import is_overtime, overtime_hours
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import same_day
from ..core.constants import TREND_RECORDS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..locations.repository import LocationRepository


@dataclass(frozen=True)
class LocationAnalytics:
    location_id: str
    name: str
    total: int
    present: int
    on_time: int
    late: int
    overtime: int
    absent: int

    def to_dict(self) -> dict:
        return {
            "id": self.location_id,
            "name": self.name,
            "total": self.total,
            "present": self.present,
            "onTime": self.on_time,
            "late": self.late,
            "overtime": self.overtime,
            "absent": self.absent,
        }


class DashboardService:
    """Read-only admin views over the ledger."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        locations: LocationRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._locations = locations

    def overview(self, *, today: date) -> dict:
        records = self._attendance.list_records()
        return {
            "totalWorkforce": len(self._employees.list_employees()),
            "onSiteNow": sum(1 for r in records if r.is_open and same_day(r.check_in_time, today)),
            "lateToday": sum(
                1 for r in records if r.status == AttendanceStatus.LATE and same_day(r.check_in_time, today)
            ),
            "locations": len(self._locations.list_locations()),
        }

    def location_analytics(self, *, today: date) -> list[LocationAnalytics]:
        employees = self._employees.list_employees()
        records = self._attendance.list_records()

        out = []
        for loc in self._locations.list_locations():
            assigned = sum(1 for e in employees if e.location_id == loc.location_id)
            todays = [r for r in records if r.location_id == loc.location_id and same_day(r.check_in_time, today)]
            present = len(todays)
            out.append(
                LocationAnalytics(
                    location_id=loc.location_id,
                    name=loc.name,
                    total=assigned,
                    present=present,
                    on_time=sum(1 for r in todays if r.status == AttendanceStatus.PRESENT),
                    late=sum(1 for r in todays if r.status == AttendanceStatus.LATE),
                    overtime=sum(1 for r in todays if is_overtime(r)),
                    absent=max(0, assigned - present),
                )
            )
        return out

    def employee_stats(self, employee_id: str, *, trend_size: Optional[int] = None) -> dict:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee not found: {employee_id}")

        records = list(self._attendance.get_records_for_employee(employee_id))
        recent = sorted(
            (r for r in records if r.check_in_time is not None),
            key=lambda r: r.check_in_time,
        )[-(trend_size or TREND_RECORDS):]

        return {
            "employeeId": employee.employee_id,
            "name": employee.name,
            "lateDays": sum(1 for r in records if r.status == AttendanceStatus.LATE),
            "presentDays": sum(1 for r in records if r.check_in_time is not None),
            "absentDays": sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
            "totalOvertimeHours": sum(overtime_hours(r) for r in records),
            "trend": [
                {"day": f"Day {i + 1}", "date": r.check_in_time.strftime("%Y-%m-%d"), "hours": r.duration_hours}
                for i, r in enumerate(recent)
            ],
        }
