from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_direction_flag, require_int
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    def attendance_scan():
        """Simulated RFID scan: {"employee_id": 1, "direction": "in"|"out"}."""

        data = request.get_json(silent=True) or {}
        try:
            employee_id = require_int(data.get("employee_id"), "employee_id")
            check_in = require_direction_flag(str(data.get("direction") or ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        result = service.simulate_scan(employee_id, check_in=check_in)
        payload = {
            "success": True,
            "record": service.to_ui(result.event),
            "description": result.event.describe(),
            "persisted": result.persisted,
        }
        if result.failure:
            payload["message"] = f"Failed to append attendance CSV: {result.failure.reason}"
        return jsonify(payload), 201

    @app.route("/attendance/records", methods=["GET"], endpoint="attendance_records")
    def attendance_records():
        day_s = request.args.get("date")
        start_s = request.args.get("start")
        end_s = request.args.get("end")

        try:
            if day_s:
                records = service.records_on(parse_iso_date(day_s))
            elif start_s or end_s:
                if not start_s or not end_s:
                    raise ValidationError("Both start and end are required")
                records = service.records_between(parse_iso_date(start_s), parse_iso_date(end_s))
            else:
                records = service.all_records()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "records": [service.to_ui(r) for r in records]}), 200
