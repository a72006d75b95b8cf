from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .employees.service import EmployeeService
from .geofence.validator import build_validator
from .insights.service import InsightService
from .ledger.seed import build_demo_ledger
from .ledger.store import InMemoryLedger
from .locations.service import LocationService
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    ledger: InMemoryLedger

    location_service: LocationService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    dashboard_service: DashboardService
    insight_service: InsightService


def build_container(
    *,
    seed_demo: bool = False,
    geofence_method: str = "flat",
    gemini_api_key: Optional[str] = None,
    insights_model: str = "gemini-3-flash-preview",
    insights_timeout: float = 20.0,
    ledger: Optional[InMemoryLedger] = None,
) -> Container:
    if ledger is None:
        ledger = build_demo_ledger() if seed_demo else InMemoryLedger()

    return Container(
        ledger=ledger,
        location_service=LocationService(ledger),
        employee_service=EmployeeService(ledger, ledger),
        attendance_service=AttendanceService(
            ledger,
            ledger,
            ledger,
            strategy_factory=AttendanceStrategyFactory(),
            validator=build_validator(geofence_method),
        ),
        payroll_service=PayrollService(ledger, ledger),
        dashboard_service=DashboardService(ledger, ledger, ledger),
        insight_service=InsightService(api_key=gemini_api_key, model=insights_model, timeout=insights_timeout),
    )
