from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.responses import error_response
from ..common.validators import require_json_object
from ..container import Container
from ..pages.guards import admin_required

EXPORT_FIELDS = ["timestamp", "name", "className", "status", "note"]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="api_record_attendance")
    def record_attendance():
        try:
            data = require_json_object(request.get_json(silent=True))
            container.attendance_service.record(
                name=data.get("name"),
                class_name=data.get("className"),
                status=data.get("status") or "present",
                note=data.get("note"),
            )
            return jsonify({"success": True})
        except Exception as e:
            return error_response("Failed to record attendance", e)

    @app.route("/api/attendance", methods=["GET"], endpoint="api_list_attendance")
    def list_attendance():
        try:
            records = container.attendance_service.list_records()
            return jsonify({"records": [r.to_dict() for r in records]})
        except Exception as e:
            return error_response("Failed to fetch records", e)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="api_today_attendance")
    def today_attendance():
        try:
            summary = container.attendance_service.today_summary()
            return jsonify(summary.to_dict())
        except Exception as e:
            return error_response("Failed to fetch records", e)

    @app.route("/api/attendance/export", methods=["GET"], endpoint="api_export_attendance")
    @admin_required
    def export_attendance():
        try:
            records = container.attendance_service.list_records()
        except Exception as e:
            return error_response("Failed to fetch records", e)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for record in records:
            writer.writerow(record.to_dict())

        # utf-8-sig so Excel shows Korean names correctly
        csv_bytes = out.getvalue().encode("utf-8-sig")
        stamp = now_local(app.config.get("SCHOOL_TIMEZONE", "Asia/Seoul")).strftime("%Y%m%d")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{stamp}.csv"},
        )
