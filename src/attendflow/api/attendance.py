from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..container import Container
from .helpers import coords_from, json_body


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/employees/<employee_id>/checkin", methods=["POST"], endpoint="checkin")
    def checkin(employee_id: str):
        """Verified check-in: QR token, then geofence, then the record with its photo."""
        data = json_body()
        result = service.verify_and_check_in(
            employee_id,
            str(data.get("qrCode") or ""),
            coords_from(data),
            data.get("photo") or None,
        )
        if not result:
            return jsonify({"success": False, "reason": result.reason.value, "message": result.message}), 400

        return jsonify({"success": True, "message": result.message, "record": result.record.to_dict()}), 201

    @app.route("/api/employees/<employee_id>/checkout", methods=["POST"], endpoint="checkout")
    def checkout(employee_id: str):
        if not service.check_out(employee_id):
            return jsonify({"success": False, "message": "No open check-in for today."}), 409
        return jsonify({"success": True, "message": "Checked out successfully."})

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        limit = max(request.args.get("limit", default=15, type=int), 0)
        return jsonify(service.get_history_ui(employee_id, limit=limit))

    @app.route("/api/employees/<employee_id>/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today(employee_id: str):
        record = service.get_today_record(employee_id, now_local().date())
        return jsonify({"record": record.to_dict() if record else None})

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        location_id = request.args.get("locationId")
        records = service.records_for_location(location_id) if location_id else service.list_records()
        return jsonify([r.to_dict() for r in records])
