import pytest

from attendflow.core.enums import EmployeeStatus, Role
from attendflow.core.exceptions import NotFoundError, ValidationError
from attendflow.employees.csv_import import parse_employee_rows

HEADER = "name,employeeId,role,locationId,department,baseSalary,hourlyRate\n"


def test_import_well_formed_row_uses_defaults(employee_service, ledger):
    created = employee_service.import_csv(HEADER + "Alice Ng,EMP100,EMPLOYEE,loc-1,Ops,3000,20\n")

    assert len(created) == 1
    alice = created[0]
    assert alice.name == "Alice Ng"
    assert alice.code == "EMP100"
    assert alice.base_salary == 3000.0
    assert alice.hourly_rate == 20.0
    assert alice.ot_multiplier == 1.5
    assert (alice.penalty, alice.loan_repayment, alice.bonus) == (0.0, 0.0, 0.0)
    assert alice.status == EmployeeStatus.ACTIVE
    assert alice.onboarded is False
    # appended after the existing employees
    assert [e.code for e in ledger.list_employees()] == ["EMP001", "EMP100"]


def test_import_short_row_creates_nothing(employee_service, ledger):
    created = employee_service.import_csv(HEADER + "Bob,EMP101,EMPLOYEE,loc-1,Ops,3000\n")

    assert created == []
    assert len(ledger.list_employees()) == 1


def test_import_blank_fields_fall_back(employee_service):
    created = employee_service.import_csv(HEADER + "Carol,EMP102,,,,abc,\n\nDan,EMP103,admin,loc-9,Legal,100,5\n")

    assert [e.code for e in created] == ["EMP102", "EMP103"]
    carol, dan = created
    assert carol.role == Role.EMPLOYEE
    assert carol.location_id == "loc-1"
    assert carol.department == "Unassigned"
    assert carol.base_salary == 0.0
    assert dan.role == Role.ADMIN
    # imports do not check that the location exists
    assert dan.location_id == "loc-9"


def test_parse_rows_skips_header_and_short_rows():
    rows = parse_employee_rows(HEADER + "a,b,c\nEve,EMP1,EMPLOYEE,loc-2,QA,1,2,extra\n")

    assert len(rows) == 1
    assert rows[0]["location_id"] == "loc-2"


def test_add_employee_validates(employee_service):
    with pytest.raises(ValidationError):
        employee_service.add_employee(name="", code="X", location_id="loc-1")
    with pytest.raises(ValidationError):
        employee_service.add_employee(name="Zed", code="EMP200", location_id="loc-404")
    with pytest.raises(ValidationError):
        employee_service.add_employee(name="Zed", code="EMP200", location_id="loc-1", ot_multiplier=0.5)

    emp = employee_service.add_employee(name="Zed", code="EMP200", location_id="loc-1", base_salary="2500")
    assert emp.base_salary == 2500.0
    assert employee_service.list_employees()[0] == emp


def test_toggle_status_flips(employee_service):
    assert employee_service.toggle_status("emp-1").status == EmployeeStatus.INACTIVE
    assert employee_service.toggle_status("emp-1").status == EmployeeStatus.ACTIVE


def test_adjust_financials(employee_service):
    emp = employee_service.adjust_financials("emp-1", penalty=50, loan_repayment=120.5, bonus=None)

    assert emp.penalty == 50.0
    assert emp.loan_repayment == 120.5
    assert emp.bonus == 200.0

    with pytest.raises(ValidationError):
        employee_service.adjust_financials("emp-1", penalty=-1)
    with pytest.raises(ValidationError):
        employee_service.adjust_financials("emp-1", name="Nope")


def test_unknown_employee_raises_not_found(employee_service):
    with pytest.raises(NotFoundError):
        employee_service.toggle_status("emp-404")


def test_search_and_departments(employee_service):
    employee_service.add_employee(name="Maria Lopez", code="EMP300", location_id="loc-1", department="Sales")

    assert employee_service.departments() == ["Sales", "Engineering"]
    assert [e.code for e in employee_service.search("maria")] == ["EMP300"]
    assert [e.code for e in employee_service.search("emp001")] == ["EMP001"]
    assert employee_service.search("", department="Engineering")[0].code == "EMP001"
    assert employee_service.search("maria", department="Engineering") == []


def test_import_ignores_caller_ids(employee_service, ledger):
    created = employee_service.import_employees(
        [{"employee_id": "emp-1", "name": "Eve", "code": "EMP104", "location_id": "loc-1"}]
    )

    assert len(created) == 1
    assert created[0].employee_id != "emp-1"
    ids = [e.employee_id for e in ledger.list_employees()]
    assert len(ids) == len(set(ids))
    assert ledger.get_employee("emp-1").code == "EMP001"


def test_update_onboarded_flag_is_coerced(employee_service):
    assert employee_service.update_employee("emp-1", onboarded="no").onboarded is False
    assert employee_service.update_employee("emp-1", onboarded="true").onboarded is True
    with pytest.raises(ValidationError):
        employee_service.update_employee("emp-1", onboarded="maybe")
