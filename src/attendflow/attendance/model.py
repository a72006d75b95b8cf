from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import hours_between
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one shift instance.

    Open while check_out_time is None; closed records are never edited.
    """

    attendance_id: str
    employee_id: str
    location_id: str
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    latitude: float = 0.0
    longitude: float = 0.0
    photo_url: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None

    @property
    def is_closed(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is not None

    @property
    def duration_hours(self) -> float:
        return hours_between(self.check_in_time, self.check_out_time)

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "locationId": self.location_id,
            "checkIn": self.check_in_time.isoformat() if self.check_in_time else None,
            "checkOut": self.check_out_time.isoformat() if self.check_out_time else None,
            "status": self.status.value,
            "lat": self.latitude,
            "lng": self.longitude,
            "photoUrl": self.photo_url,
        }
