from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .helpers import json_body, pick

EMPLOYEE_FIELDS = {
    "id": "employee_id",
    "name": "name",
    "employeeId": "code",
    "role": "role",
    "locationId": "location_id",
    "department": "department",
    "baseSalary": "base_salary",
    "hourlyRate": "hourly_rate",
    "otMultiplier": "ot_multiplier",
    "penalty": "penalty",
    "loanRepayment": "loan_repayment",
    "bonus": "bonus",
    "status": "status",
    "onboarded": "onboarded",
    "avatar": "avatar",
}

FINANCIAL_FIELDS = {
    "baseSalary": "base_salary",
    "hourlyRate": "hourly_rate",
    "otMultiplier": "ot_multiplier",
    "penalty": "penalty",
    "loanRepayment": "loan_repayment",
    "bonus": "bonus",
}


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        department = request.args.get("department")
        if department == "All Departments":
            department = None
        employees = service.search(request.args.get("q", ""), department)
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        emp = service.add_employee(**pick(json_body(), EMPLOYEE_FIELDS))
        return jsonify(emp.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(service.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        emp = service.update_employee(employee_id, **pick(json_body(), EMPLOYEE_FIELDS))
        return jsonify(emp.to_dict())

    @app.route("/api/employees/<employee_id>/financials", methods=["PUT"], endpoint="adjust_financials")
    def adjust_financials(employee_id: str):
        emp = service.adjust_financials(employee_id, **pick(json_body(), FINANCIAL_FIELDS))
        return jsonify(emp.to_dict())

    @app.route("/api/employees/<employee_id>/toggle-status", methods=["POST"], endpoint="toggle_employee_status")
    def toggle_employee_status(employee_id: str):
        return jsonify(service.toggle_status(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>/onboarding", methods=["POST"], endpoint="complete_onboarding")
    def complete_onboarding(employee_id: str):
        return jsonify(service.complete_onboarding(employee_id).to_dict())

    @app.route("/api/employees/import", methods=["POST"], endpoint="import_employees")
    def import_employees():
        """Bulk import from an uploaded CSV file (field "file") or a text/csv body."""
        upload = request.files.get("file")
        if upload is not None:
            try:
                text = upload.read().decode("utf-8-sig")
            except UnicodeDecodeError:
                raise ValidationError("CSV file must be UTF-8") from None
        else:
            text = request.get_data(as_text=True)
        if not text.strip():
            raise ValidationError("CSV file is empty")

        created = service.import_csv(text)
        return jsonify({"success": True, "imported": len(created), "employees": [e.to_dict() for e in created]})

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        return jsonify(service.departments())
