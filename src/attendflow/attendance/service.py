from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local, same_day
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, CheckInRejection
from ..employees.repository import EmployeeRepository
from ..geofence.model import Coordinates
from ..geofence.validator import FlatEarthValidator, GeofenceValidator
from ..locations.repository import LocationRepository
from .classifier import overtime_hours, report_completed
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_REJECTION_MESSAGES = {
    CheckInRejection.UNKNOWN_EMPLOYEE: "Employee does not exist.",
    CheckInRejection.NO_LOCATION: "No assigned location for this employee.",
    CheckInRejection.INVALID_QR: "Invalid QR Code for this location.",
    CheckInRejection.LOCATION_UNAVAILABLE: "Could not verify geolocation.",
    CheckInRejection.OUTSIDE_RADIUS: "Verification failed: Outside allowed radius.",
    CheckInRejection.ALREADY_CHECKED_IN: "Already checked in today.",
}

_STATUS_LABELS = {
    AttendanceStatus.PRESENT: "On time",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.OVERTIME: "Overtime",
    AttendanceStatus.ABSENT: "Absent",
}


@dataclass(frozen=True)
class CheckInResult:
    """Outcome of a check-in attempt: the new record, or why none was created."""

    record: Optional[AttendanceRecord] = None
    reason: Optional[CheckInRejection] = None

    def __bool__(self) -> bool:
        return self.record is not None

    @property
    def message(self) -> str:
        if self.reason is None:
            return "Checked in successfully."
        return _REJECTION_MESSAGES[self.reason]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        locations: LocationRepository,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        validator: Optional[GeofenceValidator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._locations = locations
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._validator = validator or FlatEarthValidator()
        self._clock = clock

    def check_in(
        self,
        employee_id: str,
        coords: Optional[Coordinates],
        photo_url: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> CheckInResult:
        # Unknown ids never get a lock entry.
        if not self._employees.get_employee(employee_id):
            return self._reject(employee_id, CheckInRejection.UNKNOWN_EMPLOYEE)
        return self._attendance.with_employee_lock(
            employee_id,
            lambda: self._check_in(employee_id, coords, photo_url, now=now or self._clock()),
        )

    def verify_and_check_in(
        self,
        employee_id: str,
        scanned_token: str,
        coords: Optional[Coordinates],
        photo_url: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> CheckInResult:
        """Full kiosk flow: QR token first, then geofence, then record."""

        employee = self._employees.get_employee(employee_id)
        if not employee:
            return self._reject(employee_id, CheckInRejection.UNKNOWN_EMPLOYEE)

        location = self._locations.get_location(employee.location_id)
        if not location:
            return self._reject(employee_id, CheckInRejection.NO_LOCATION)

        if (scanned_token or "").strip() != location.qr_code:
            return self._reject(employee_id, CheckInRejection.INVALID_QR)

        return self.check_in(employee_id, coords, photo_url, now=now)

    def _check_in(
        self,
        employee_id: str,
        coords: Optional[Coordinates],
        photo_url: Optional[str],
        *,
        now: datetime,
    ) -> CheckInResult:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            return self._reject(employee_id, CheckInRejection.UNKNOWN_EMPLOYEE)

        location = self._locations.get_location(employee.location_id)
        if not location:
            return self._reject(employee_id, CheckInRejection.NO_LOCATION)

        if coords is None:
            return self._reject(employee_id, CheckInRejection.LOCATION_UNAVAILABLE)

        if not self._validator.is_within_radius(coords, location.point, location.radius):
            return self._reject(employee_id, CheckInRejection.OUTSIDE_RADIUS)

        if self._attendance.get_open_record(employee_id, now.date()):
            return self._reject(employee_id, CheckInRejection.ALREADY_CHECKED_IN)

        decision = self._factory.for_checkin(now=now).decide_checkin(now=now)
        record = AttendanceRecord(
            attendance_id=f"att-{uuid.uuid4().hex[:12]}",
            employee_id=employee_id,
            location_id=location.location_id,
            check_in_time=now,
            check_out_time=None,
            status=decision.status,
            latitude=coords.latitude,
            longitude=coords.longitude,
            photo_url=photo_url,
        )
        self._attendance.insert_record(record)
        logger.info(
            "check-in %s at %s: %s%s",
            employee_id,
            location.location_id,
            decision.status.value,
            f" ({decision.note})" if decision.note else "",
        )
        return CheckInResult(record=record)

    def _reject(self, employee_id: str, reason: CheckInRejection) -> CheckInResult:
        logger.info("check-in rejected for %s: %s", employee_id, reason.value)
        return CheckInResult(reason=reason)

    def check_out(self, employee_id: str, *, now: Optional[datetime] = None) -> bool:
        if not self._employees.get_employee(employee_id):
            return False
        now = now or self._clock()
        return self._attendance.with_employee_lock(employee_id, lambda: self._check_out(employee_id, now))

    def _check_out(self, employee_id: str, now: datetime) -> bool:
        record = self._attendance.get_open_record(employee_id, now.date())
        if not record:
            return False
        if now < record.check_in_time:
            logger.warning("check-out for %s before its check-in, ignored", employee_id)
            return False

        closed = self._attendance.close_record(record.attendance_id, now)
        if closed:
            logger.info("check-out %s after %.2fh", employee_id, (now - record.check_in_time).total_seconds() / 3600)
        return closed

    def get_today_record(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        """Most recent record checked in on the given day, open or closed."""
        return next(
            (r for r in self._attendance.get_records_for_employee(employee_id) if same_day(r.check_in_time, today)),
            None,
        )

    def get_history(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        rows = list(self._attendance.get_records_for_employee(employee_id))
        rows.sort(key=lambda r: r.check_in_time or datetime.min, reverse=True)
        return rows[: max(limit, 0)]

    def get_history_ui(self, employee_id: str, *, limit: int = 15) -> list[dict]:
        return [self._to_ui(r) for r in self.get_history(employee_id, limit=limit)]

    def records_for_location(self, location_id: str) -> list[AttendanceRecord]:
        return [r for r in self._attendance.list_records() if r.location_id == location_id]

    def list_records(self) -> list[AttendanceRecord]:
        return list(self._attendance.list_records())

    def _to_ui(self, r: AttendanceRecord) -> dict:
        reported = report_completed(r, factory=self._factory)
        return {
            "id": r.attendance_id,
            "date": r.check_in_time.strftime("%Y-%m-%d") if r.check_in_time else "-",
            "check_in": r.check_in_time.strftime("%H:%M:%S") if r.check_in_time else "-",
            "check_out": r.check_out_time.strftime("%H:%M:%S") if r.check_out_time else "-",
            "hours": round(r.duration_hours, 2),
            "overtime_hours": round(overtime_hours(r), 2),
            "status": _STATUS_LABELS.get(reported.status, reported.status.value),
            "note": reported.note,
        }
