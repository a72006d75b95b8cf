from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import STANDARD_SHIFT_HOURS
from ..core.enums import AttendanceStatus
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .strategies.base import StatusDecision

_factory = AttendanceStrategyFactory()


def classify_check_in(now: datetime, *, factory: Optional[AttendanceStrategyFactory] = None) -> AttendanceStatus:
    factory = factory or _factory
    return factory.for_checkin(now=now).decide_checkin(now=now).status


def report_completed(record: AttendanceRecord, *, factory: Optional[AttendanceStrategyFactory] = None) -> StatusDecision:
    """Status and note used by reports; the stored status is never rewritten."""
    factory = factory or _factory
    return factory.for_completed(record=record).decide_completed(record=record)


def classify_completed(record: AttendanceRecord, *, factory: Optional[AttendanceStrategyFactory] = None) -> AttendanceStatus:
    return report_completed(record, factory=factory).status


def overtime_hours(record: AttendanceRecord) -> float:
    if not record.is_closed:
        return 0.0
    return max(record.duration_hours - STANDARD_SHIFT_HOURS, 0.0)


def is_overtime(record: AttendanceRecord) -> bool:
    return record.status == AttendanceStatus.OVERTIME or overtime_hours(record) > 0
