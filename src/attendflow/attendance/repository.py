from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, Protocol, Sequence, TypeVar

from .model import AttendanceRecord

T = TypeVar("T")


class AttendanceRepository(Protocol):
    def list_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_records_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_open_record(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert_record(self, record: AttendanceRecord) -> None:
        """Insert as the newest record."""

        raise NotImplementedError

    def close_record(self, attendance_id: str, check_out_time: datetime) -> bool:
        raise NotImplementedError

    def with_employee_lock(self, employee_id: str, fn: Callable[[], T]) -> T:
        """Run fn without interleaving other check-in/out of the same employee."""

        raise NotImplementedError
