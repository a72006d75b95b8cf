"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

METERS_PER_DEGREE = 111_320.0
EARTH_RADIUS_METERS = 6_371_000.0

# Check-ins whose hour component is above this are LATE.
LATE_AFTER_HOUR = 9
STANDARD_SHIFT_HOURS = 8.0

DEFAULT_OT_MULTIPLIER = 1.5
DEFAULT_RADIUS_METERS = 50.0
DEFAULT_SHIFT_START = "09:00"
DEFAULT_SHIFT_END = "18:00"
DEFAULT_DEPARTMENT = "Unassigned"
DEFAULT_HISTORY_LIMIT = 30
TREND_RECORDS = 7

IMPORT_MIN_COLUMNS = 7
PAYROLL_CSV_HEADER = [
    "Name",
    "Employee ID",
    "Department",
    "Status",
    "Base Salary",
    "Bonus",
    "Penalty",
    "Loan",
    "Total OT Hrs",
    "Net Pay",
]
