from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..container import Container
from .helpers import json_body, pick

LOCATION_FIELDS = {
    "id": "location_id",
    "name": "name",
    "type": "premise_type",
    "latitude": "latitude",
    "longitude": "longitude",
    "radius": "radius",
    "qrCode": "qr_code",
    "startTime": "start_time",
    "endTime": "end_time",
}


def register(app: Flask, container: Container) -> None:
    service = container.location_service

    @app.route("/api/locations", methods=["GET"], endpoint="list_locations")
    def list_locations():
        return jsonify([loc.to_dict() for loc in service.list_locations()])

    @app.route("/api/locations", methods=["POST"], endpoint="add_location")
    def add_location():
        loc = service.add_location(**pick(json_body(), LOCATION_FIELDS))
        return jsonify(loc.to_dict()), 201

    @app.route("/api/locations/<location_id>", methods=["GET"], endpoint="get_location")
    def get_location(location_id: str):
        return jsonify(service.get_location(location_id).to_dict())

    @app.route("/api/locations/<location_id>", methods=["PUT"], endpoint="update_location")
    def update_location(location_id: str):
        loc = service.update_location(location_id, **pick(json_body(), LOCATION_FIELDS))
        return jsonify(loc.to_dict())

    @app.route("/api/locations/<location_id>", methods=["DELETE"], endpoint="delete_location")
    def delete_location(location_id: str):
        if not service.delete_location(location_id):
            return jsonify({"success": False, "message": "Location not found"}), 404
        return jsonify({"success": True})

    @app.route("/api/locations/<location_id>/qr.png", methods=["GET"], endpoint="location_qr_image")
    def location_qr_image(location_id: str):
        """Printable QR code holding the location's check-in token."""
        return send_file(io.BytesIO(service.qr_png(location_id)), mimetype="image/png")
