from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import PayrollReport


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, records: Iterable[AttendanceRecord]) -> Optional[PayrollReport]:
        raise NotImplementedError
