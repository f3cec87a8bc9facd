from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response
from ..common.validators import require_json_object
from ..container import Container
from ..photos.model import PhotoUpload


def _photo_from_request():
    file = request.files.get("file")
    if file is None or not file.filename:
        return None
    return PhotoUpload(filename=file.filename, content=file.read(), mimetype=file.mimetype or "image/jpeg")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="api_list_students")
    def list_students():
        try:
            students = container.student_service.list_students()
            return jsonify({"students": [s.to_dict() for s in students]})
        except Exception as e:
            return error_response("Failed to fetch data", e)

    @app.route("/api/students/by-class", methods=["GET"], endpoint="api_students_by_class")
    def students_by_class():
        try:
            roster = container.student_service.roster_by_class()
            return jsonify({"classes": [c.to_dict() for c in roster]})
        except Exception as e:
            return error_response("Failed to fetch data", e)

    @app.route("/api/students", methods=["POST"], endpoint="api_add_student")
    def add_student():
        try:
            container.student_service.add_student(
                name=request.form.get("name"),
                class_name=request.form.get("className"),
                photo=_photo_from_request(),
            )
            return jsonify({"success": True})
        except Exception as e:
            return error_response("Failed to add student", e)

    @app.route("/api/students", methods=["DELETE"], endpoint="api_delete_student")
    def delete_student():
        try:
            data = require_json_object(request.get_json(silent=True))
            container.student_service.remove_student(
                name=data.get("name"),
                class_name=data.get("className"),
            )
            return jsonify({"success": True})
        except Exception as e:
            return error_response("Failed to delete student", e)
