from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, note=f"checked in at {now:%H:%M}")

    def decide_completed(self, *, record: AttendanceRecord) -> StatusDecision:
        return StatusDecision(status=record.status)
