from __future__ import annotations

from datetime import datetime

from ...core.constants import STANDARD_SHIFT_HOURS
from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class OvertimeStrategy(AttendanceStrategy):
    """Closed shift longer than the standard shift length."""

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        # Overtime is only known once the shift is closed.
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_completed(self, *, record: AttendanceRecord) -> StatusDecision:
        extra = record.duration_hours - STANDARD_SHIFT_HOURS
        return StatusDecision(status=AttendanceStatus.OVERTIME, note=f"{extra:.1f}h overtime")
