from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a tracked person."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class PremiseType(str, Enum):
    OFFICE = "OFFICE"
    FACTORY = "FACTORY"
    WAREHOUSE = "WAREHOUSE"
    SHOWROOM = "SHOWROOM"


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    OVERTIME = "OVERTIME"
    ABSENT = "ABSENT"


class CheckInRejection(str, Enum):
    """Why a check-in was refused. The ledger is left unchanged in every case."""

    UNKNOWN_EMPLOYEE = "UNKNOWN_EMPLOYEE"
    NO_LOCATION = "NO_LOCATION"
    INVALID_QR = "INVALID_QR"
    LOCATION_UNAVAILABLE = "LOCATION_UNAVAILABLE"
    OUTSIDE_RADIUS = "OUTSIDE_RADIUS"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
