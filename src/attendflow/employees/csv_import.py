from __future__ import annotations

import csv
import io
import logging
from typing import Optional

from ..core.constants import DEFAULT_DEPARTMENT, IMPORT_MIN_COLUMNS
from ..core.enums import Role

logger = logging.getLogger(__name__)


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def _to_role(value: str) -> Role:
    try:
        return Role(value.upper())
    except ValueError:
        return Role.EMPLOYEE


def parse_employee_rows(text: str, *, default_location_id: Optional[str] = None) -> list[dict]:
    """Parse a bulk-import CSV into employee inputs.

    Columns: name, employeeId, role, locationId, department, baseSalary,
    hourlyRate. The first line is a header. Rows with fewer than 7 columns are
    skipped without error.
    """

    rows = list(csv.reader(io.StringIO(text)))
    out: list[dict] = []
    for line_no, columns in enumerate(rows[1:], start=2):
        if len(columns) < IMPORT_MIN_COLUMNS:
            logger.debug("import: skipping line %d (%d columns)", line_no, len(columns))
            continue

        name, code, role, location_id, department, base_salary, hourly_rate = (c.strip() for c in columns[:7])
        out.append(
            {
                "name": name,
                "code": code,
                "role": _to_role(role) if role else Role.EMPLOYEE,
                "location_id": location_id or default_location_id or "",
                "department": department or DEFAULT_DEPARTMENT,
                "base_salary": _to_float(base_salary),
                "hourly_rate": _to_float(hourly_rate),
            }
        )
    return out
