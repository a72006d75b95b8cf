from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def hours_between(start: Optional[datetime], end: Optional[datetime]) -> float:
    """Elapsed hours from start to end, 0.0 when either side is missing."""
    if start is None or end is None:
        return 0.0
    return (end - start).total_seconds() / 3600.0


def same_day(value: Optional[datetime], day: date) -> bool:
    return value is not None and value.date() == day
