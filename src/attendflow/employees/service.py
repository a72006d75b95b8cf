from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, Mapping, Optional

from ..common.validators import require_at_least, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_OT_MULTIPLIER
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..locations.repository import LocationRepository
from .csv_import import parse_employee_rows
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_FINANCIAL_FIELDS = ("base_salary", "hourly_rate", "penalty", "loan_repayment", "bonus", "ot_multiplier")


def _role(value) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid role: {value!r}") from None


def _status(value) -> EmployeeStatus:
    if isinstance(value, EmployeeStatus):
        return value
    try:
        return EmployeeStatus(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid status: {value!r}") from None


def _flag(value, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in {"true", "yes", "y", "1", "on"}:
        return True
    if text in {"false", "no", "n", "0", "off", ""}:
        return False
    raise ValidationError(f"{field_name} must be true or false")


class EmployeeService:
    """Use case: manage employees and their compensation fields (admin)."""

    def __init__(self, employees: EmployeeRepository, locations: LocationRepository):
        self._employees = employees
        self._locations = locations

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_employees())

    def list_active(self) -> list[Employee]:
        return [e for e in self._employees.list_employees() if e.is_active]

    def get_employee(self, employee_id: str) -> Employee:
        emp = self._employees.get_employee(employee_id)
        if not emp:
            raise NotFoundError(f"Employee not found: {employee_id}")
        return emp

    def add_employee(self, **fields) -> Employee:
        employee = self._validated(self._build(fields), check_location=True)
        self._employees.add_employee(employee)
        logger.info("employee added: %s (%s)", employee.employee_id, employee.code)
        return employee

    def update_employee(self, employee_id: str, **changes) -> Employee:
        current = self.get_employee(employee_id)
        changes.pop("employee_id", None)
        if "role" in changes:
            changes["role"] = _role(changes["role"])
        if "status" in changes:
            changes["status"] = _status(changes["status"])
        if "onboarded" in changes:
            changes["onboarded"] = _flag(changes["onboarded"], "Onboarded")

        updated = self._validated(
            replace(current, **changes),
            check_location="location_id" in changes,
        )
        self._employees.update_employee(updated)
        logger.info("employee updated: %s", employee_id)
        return updated

    def adjust_financials(self, employee_id: str, **amounts) -> Employee:
        unknown = set(amounts) - set(_FINANCIAL_FIELDS)
        if unknown:
            raise ValidationError(f"Not a financial field: {', '.join(sorted(unknown))}")
        return self.update_employee(employee_id, **{k: v for k, v in amounts.items() if v is not None})

    def toggle_status(self, employee_id: str) -> Employee:
        """Flip ACTIVE/INACTIVE. Attendance history is left as is."""
        current = self.get_employee(employee_id)
        new_status = EmployeeStatus.INACTIVE if current.is_active else EmployeeStatus.ACTIVE
        updated = replace(current, status=new_status)
        self._employees.update_employee(updated)
        logger.info("employee %s is now %s", employee_id, new_status.value)
        return updated

    def complete_onboarding(self, employee_id: str) -> Employee:
        updated = replace(self.get_employee(employee_id), onboarded=True)
        self._employees.update_employee(updated)
        return updated

    def import_employees(self, batch: Iterable[Mapping]) -> list[Employee]:
        """Append a batch, generating ids and default financial fields."""
        created = []
        for item in batch:
            fields = dict(item)
            fields.pop("employee_id", None)
            fields.setdefault("status", EmployeeStatus.ACTIVE)
            fields.setdefault("onboarded", False)
            try:
                created.append(self._validated(self._build(fields), check_location=False))
            except ValidationError as e:
                # Malformed rows are dropped, the rest of the batch still goes in.
                logger.debug("import: skipping %r: %s", fields.get("code"), e)

        self._employees.append_employees(created)
        logger.info("imported %d employees", len(created))
        return created

    def import_csv(self, text: str) -> list[Employee]:
        locations = self._locations.list_locations()
        default_location_id = locations[0].location_id if locations else None
        return self.import_employees(parse_employee_rows(text, default_location_id=default_location_id))

    def departments(self) -> list[str]:
        seen: dict[str, None] = {}
        for e in self._employees.list_employees():
            seen.setdefault(e.department, None)
        return list(seen)

    def search(self, query: str = "", department: Optional[str] = None) -> list[Employee]:
        q = (query or "").strip().lower()
        return [
            e
            for e in self._employees.list_employees()
            if (not q or q in e.name.lower() or q in e.code.lower())
            and (not department or e.department == department)
        ]

    def _build(self, fields: Mapping) -> Employee:
        code = fields.get("code", "")
        return Employee(
            employee_id=fields.get("employee_id") or f"emp-{uuid.uuid4().hex[:8]}",
            name=fields.get("name", ""),
            code=code,
            role=_role(fields.get("role") or Role.EMPLOYEE),
            location_id=fields.get("location_id", ""),
            department=fields.get("department") or DEFAULT_DEPARTMENT,
            base_salary=fields.get("base_salary", 0.0),
            hourly_rate=fields.get("hourly_rate", 0.0),
            ot_multiplier=fields.get("ot_multiplier", DEFAULT_OT_MULTIPLIER),
            penalty=fields.get("penalty", 0.0),
            loan_repayment=fields.get("loan_repayment", 0.0),
            bonus=fields.get("bonus", 0.0),
            status=_status(fields.get("status") or EmployeeStatus.ACTIVE),
            onboarded=_flag(fields.get("onboarded"), "Onboarded"),
            avatar=fields.get("avatar") or (f"https://picsum.photos/seed/{code}/200" if code else None),
        )

    def _validated(self, emp: Employee, *, check_location: bool) -> Employee:
        name = require_non_empty(emp.name, "Name")
        code = require_non_empty(emp.code, "Employee ID")
        location_id = require_non_empty(emp.location_id, "Location")
        if check_location and not self._locations.get_location(location_id):
            raise ValidationError(f"Unknown location: {location_id}")

        return replace(
            emp,
            name=name,
            code=code,
            location_id=location_id,
            base_salary=require_non_negative(emp.base_salary, "Base salary"),
            hourly_rate=require_non_negative(emp.hourly_rate, "Hourly rate"),
            ot_multiplier=require_at_least(emp.ot_multiplier, "OT multiplier", 1.0),
            penalty=require_non_negative(emp.penalty, "Penalty"),
            loan_repayment=require_non_negative(emp.loan_repayment, "Loan repayment"),
            bonus=require_non_negative(emp.bonus, "Bonus"),
        )
