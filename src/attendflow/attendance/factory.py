from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import LATE_AFTER_HOUR, STANDARD_SHIFT_HOURS
from .model import AttendanceRecord
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.overtime_strategy import OvertimeStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    The check-in rule only looks at the hour component of the timestamp
    (anything from 10:00 on is late). A location's configured start time is
    not consulted here.
    """

    late_after_hour: int = LATE_AFTER_HOUR
    standard_shift_hours: float = STANDARD_SHIFT_HOURS

    def for_checkin(self, *, now: datetime) -> AttendanceStrategy:
        if now.hour > self.late_after_hour:
            return LateStrategy()
        return PresentStrategy()

    def for_completed(self, *, record: AttendanceRecord) -> AttendanceStrategy:
        if record.is_closed and record.duration_hours > self.standard_shift_hours:
            return OvertimeStrategy()
        return PresentStrategy()
