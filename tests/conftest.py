from __future__ import annotations

from datetime import datetime

import pytest

from attendflow.attendance.service import AttendanceService
from attendflow.core.enums import EmployeeStatus, PremiseType, Role
from attendflow.employees.model import Employee
from attendflow.employees.service import EmployeeService
from attendflow.ledger.seed import build_demo_ledger
from attendflow.ledger.store import InMemoryLedger
from attendflow.locations.model import Location
from attendflow.locations.service import LocationService
from attendflow.payroll.service import PayrollService


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 10, 9, 30, 0)


@pytest.fixture
def office() -> Location:
    return Location(
        location_id="loc-1",
        name="Headquarters Office",
        premise_type=PremiseType.OFFICE,
        latitude=37.7749,
        longitude=-122.4194,
        radius=50.0,
        qr_code="HQ-OFFICE-001",
        start_time="09:00",
        end_time="18:00",
    )


@pytest.fixture
def john() -> Employee:
    return Employee(
        employee_id="emp-1",
        name="John Doe",
        code="EMP001",
        role=Role.EMPLOYEE,
        location_id="loc-1",
        department="Engineering",
        base_salary=3500.0,
        hourly_rate=22.0,
        ot_multiplier=1.5,
        bonus=200.0,
        status=EmployeeStatus.ACTIVE,
        onboarded=True,
    )


@pytest.fixture
def ledger(office, john) -> InMemoryLedger:
    return InMemoryLedger(locations=[office], employees=[john])


@pytest.fixture
def demo_ledger() -> InMemoryLedger:
    return build_demo_ledger()


@pytest.fixture
def attendance_service(ledger) -> AttendanceService:
    return AttendanceService(ledger, ledger, ledger)


@pytest.fixture
def employee_service(ledger) -> EmployeeService:
    return EmployeeService(ledger, ledger)


@pytest.fixture
def location_service(ledger) -> LocationService:
    return LocationService(ledger)


@pytest.fixture
def payroll_service(demo_ledger) -> PayrollService:
    return PayrollService(demo_ledger, demo_ledger)
