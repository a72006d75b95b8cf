from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import same_day
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..locations.model import Location

T = TypeVar("T")


class InMemoryLedger:
    """Authoritative in-memory collections of locations, employees and records.

    Implements the location, employee and attendance repository interfaces.
    Every write goes through one of the methods below. Records reference
    employees and locations by id only, so deleting a location or deactivating
    an employee leaves history untouched.
    """

    def __init__(
        self,
        *,
        locations: Iterable[Location] = (),
        employees: Iterable[Employee] = (),
        records: Iterable[AttendanceRecord] = (),
    ):
        self._lock = threading.RLock()
        self._employee_locks: dict[str, threading.Lock] = {}
        self._locations: list[Location] = []
        self._employees: list[Employee] = []
        # Newest first.
        self._records: list[AttendanceRecord] = list(records)

        for loc in locations:
            self.add_location(loc)
        self._employees.extend(employees)

    # ----- locations -----

    def list_locations(self) -> Sequence[Location]:
        with self._lock:
            return list(self._locations)

    def get_location(self, location_id: str) -> Optional[Location]:
        with self._lock:
            return next((loc for loc in self._locations if loc.location_id == location_id), None)

    def add_location(self, location: Location) -> Location:
        with self._lock:
            if self.get_location(location.location_id):
                raise ValidationError(f"Location id already exists: {location.location_id}")
            self._locations.append(location)
            return location

    def update_location(self, location: Location) -> bool:
        with self._lock:
            for i, loc in enumerate(self._locations):
                if loc.location_id == location.location_id:
                    self._locations[i] = location
                    return True
            return False

    def delete_location(self, location_id: str) -> bool:
        with self._lock:
            before = len(self._locations)
            self._locations = [loc for loc in self._locations if loc.location_id != location_id]
            return len(self._locations) != before

    # ----- employees -----

    def list_employees(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._employees)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return next((e for e in self._employees if e.employee_id == employee_id), None)

    def add_employee(self, employee: Employee) -> Employee:
        with self._lock:
            if self.get_employee(employee.employee_id):
                raise ValidationError(f"Employee id already exists: {employee.employee_id}")
            self._employees.insert(0, employee)
            return employee

    def append_employees(self, batch: Sequence[Employee]) -> int:
        with self._lock:
            taken = {e.employee_id for e in self._employees}
            for emp in batch:
                if emp.employee_id in taken:
                    raise ValidationError(f"Employee id already exists: {emp.employee_id}")
                taken.add(emp.employee_id)
            self._employees.extend(batch)
            return len(batch)

    def update_employee(self, employee: Employee) -> bool:
        with self._lock:
            for i, e in enumerate(self._employees):
                if e.employee_id == employee.employee_id:
                    self._employees[i] = employee
                    return True
            return False

    # ----- attendance -----

    def list_records(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return list(self._records)

    def get_records_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with self._lock:
            return [r for r in self._records if r.employee_id == employee_id]

    def get_open_record(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with self._lock:
            return next(
                (
                    r
                    for r in self._records
                    if r.employee_id == employee_id and r.is_open and same_day(r.check_in_time, work_date)
                ),
                None,
            )

    def insert_record(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._records.insert(0, record)

    def close_record(self, attendance_id: str, check_out_time: datetime) -> bool:
        with self._lock:
            for i, r in enumerate(self._records):
                if r.attendance_id == attendance_id:
                    if not r.is_open:
                        return False
                    self._records[i] = replace(r, check_out_time=check_out_time)
                    return True
            return False

    def with_employee_lock(self, employee_id: str, fn: Callable[[], T]) -> T:
        with self._lock:
            lock = self._employee_locks.setdefault(employee_id, threading.Lock())
        with lock:
            return fn()
