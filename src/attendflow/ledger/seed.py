"""Demo data: three premises, ten employees and the 1-5 Feb 2026 attendance log."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, EmployeeStatus, PremiseType, Role
from ..employees.model import Employee
from ..locations.model import Location
from .store import InMemoryLedger

DEMO_LOCATIONS = [
    Location("loc-1", "Headquarters Office", PremiseType.OFFICE, 37.7749, -122.4194, 50, "HQ-OFFICE-001", "09:00", "18:00"),
    Location("loc-2", "Main Factory", PremiseType.FACTORY, 37.7833, -122.4167, 100, "FACT-MAIN-002", "08:00", "17:00"),
    Location("loc-3", "Logistics Warehouse", PremiseType.WAREHOUSE, 37.7510, -122.4476, 75, "WH-LOG-003", "00:00", "23:59"),
]

# (id, name, code, role, location, department, base, hourly, ot, penalty, loan, bonus, status)
_EMPLOYEE_ROWS = [
    ("emp-1", "John Doe", "EMP001", Role.EMPLOYEE, "loc-1", "Engineering", 3500, 22, 1.5, 0, 0, 200, EmployeeStatus.ACTIVE),
    ("emp-2", "Jane Smith", "EMP002", Role.ADMIN, "loc-1", "Human Resources", 5500, 35, 1.5, 0, 500, 300, EmployeeStatus.ACTIVE),
    ("emp-3", "Mike Wilson", "EMP003", Role.EMPLOYEE, "loc-2", "Operations", 2800, 18, 1.25, 100, 0, 0, EmployeeStatus.INACTIVE),
    ("emp-4", "Sarah Jenkins", "EMP004", Role.EMPLOYEE, "loc-1", "Marketing", 3200, 20, 1.5, 0, 0, 500, EmployeeStatus.INACTIVE),
    ("emp-5", "David Chen", "EMP005", Role.EMPLOYEE, "loc-2", "Quality Control", 2600, 16, 1.5, 0, 200, 0, EmployeeStatus.ACTIVE),
    ("emp-6", "Elena Rodriguez", "EMP006", Role.EMPLOYEE, "loc-3", "Logistics", 2900, 19, 1.5, 0, 0, 100, EmployeeStatus.ACTIVE),
    ("emp-7", "Robert Taylor", "EMP007", Role.EMPLOYEE, "loc-1", "Sales", 4000, 25, 1.5, 0, 0, 1200, EmployeeStatus.ACTIVE),
    ("emp-8", "Lisa Wang", "EMP008", Role.EMPLOYEE, "loc-2", "Maintenance", 2400, 15, 1.25, 0, 0, 0, EmployeeStatus.ACTIVE),
    ("emp-9", "Kevin Miller", "EMP009", Role.EMPLOYEE, "loc-3", "Security", 2700, 17, 1.5, 0, 150, 50, EmployeeStatus.ACTIVE),
    ("emp-10", "Anita Gupta", "EMP010", Role.EMPLOYEE, "loc-1", "Legal", 6000, 40, 1.5, 0, 0, 0, EmployeeStatus.ACTIVE),
]

DEMO_EMPLOYEES = [
    Employee(
        employee_id=eid,
        name=name,
        code=code,
        role=role,
        location_id=loc,
        department=dept,
        base_salary=float(base),
        hourly_rate=float(hourly),
        ot_multiplier=ot,
        penalty=float(penalty),
        loan_repayment=float(loan),
        bonus=float(bonus),
        status=status,
        onboarded=True,
        avatar=f"https://picsum.photos/seed/{eid.replace('-', '')}/200",
    )
    for eid, name, code, role, loc, dept, base, hourly, ot, penalty, loan, bonus, status in _EMPLOYEE_ROWS
]

DEMO_DAYS = (1, 2, 3, 4, 5)

_P = AttendanceStatus.PRESENT
_L = AttendanceStatus.LATE
_O = AttendanceStatus.OVERTIME

# day -> (check-in (h, m), check-out (h, m) or hours after check-in, status); None means absent.
_SCHEDULES = {
    "emp-1": {d: ((9, 0), (18, 0), _P) for d in DEMO_DAYS},
    "emp-2": {d: ((10, 15), (18, 0), _L) if d in (2, 4) else ((8, 55), (18, 0), _P) for d in DEMO_DAYS},
    "emp-3": {d: ((8, 0), (20, 0), _O) if d % 2 else ((8, 0), (17, 0), _P) for d in DEMO_DAYS},
    "emp-4": {d: None if d == 5 else ((9, 0), (18, 0), _P) for d in DEMO_DAYS},
    "emp-5": {d: ((9, 45), (18, 30), _L) for d in DEMO_DAYS},
    # Night shift running into the next morning.
    "emp-6": {d: ((18, 0), 10, _O) for d in DEMO_DAYS},
    "emp-7": {d: ((9, 0), (14, 0), _P) for d in DEMO_DAYS},
    "emp-8": {d: ((7, 0), (16, 0), _P) for d in DEMO_DAYS},
    "emp-9": {d: None if d in (1, 2) else ((8, 0), (17, 0), _P) for d in DEMO_DAYS},
    "emp-10": {
        1: ((8, 50), (18, 0), _P),
        2: ((11, 0), (18, 0), _L),
        3: ((9, 0), (18, 0), _P),
        4: ((9, 0), (22, 0), _O),
        5: None,
    },
}


def _shift(day: datetime, plan: Optional[tuple]) -> tuple[Optional[datetime], Optional[datetime], AttendanceStatus]:
    if plan is None:
        return None, None, AttendanceStatus.ABSENT
    (in_h, in_m), out, status = plan
    check_in = day.replace(hour=in_h, minute=in_m)
    if isinstance(out, tuple):
        check_out = day.replace(hour=out[0], minute=out[1])
    else:
        check_out = check_in + timedelta(hours=out)
    return check_in, check_out, status


def demo_attendance() -> list[AttendanceRecord]:
    """Newest first, like the live ledger."""
    records = []
    for d in reversed(DEMO_DAYS):
        for emp in DEMO_EMPLOYEES:
            check_in, check_out, status = _shift(datetime(2026, 2, d), _SCHEDULES[emp.employee_id][d])
            records.append(
                AttendanceRecord(
                    attendance_id=f"att-{emp.employee_id}-{d}",
                    employee_id=emp.employee_id,
                    location_id=emp.location_id,
                    check_in_time=check_in,
                    check_out_time=check_out,
                    status=status,
                )
            )
    return records


def build_demo_ledger() -> InMemoryLedger:
    return InMemoryLedger(locations=DEMO_LOCATIONS, employees=DEMO_EMPLOYEES, records=demo_attendance())
