from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import format_sheet_date, now_local
from ..container import Container
from ..core.constants import ADMIN_OVERRIDE_NOTE
from .guards import ADMIN_SESSION_KEY, admin_required
from .helpers import register_template_helpers

logger = logging.getLogger(__name__)

# Offered in the add-student form; any class name typed into the sheet still works
DEFAULT_CLASS_CHOICES = ["영아부(0-3세)", "유치부(4-7세)", "토끼반", "기린반", "사자반"]


def register(app: Flask, container: Container) -> None:
    register_template_helpers(app)

    @app.route("/", endpoint="index")
    def index():
        roster = []
        load_error = None
        try:
            roster = container.student_service.roster_by_class()
        except Exception as e:
            logger.error("Failed to load students: %s", e)
            load_error = "학생 목록을 불러오지 못했습니다."

        return render_template(
            "index.html",
            roster=roster,
            load_error=load_error,
            confirm_timeout=int(app.config.get("CONFIRM_TIMEOUT_SECONDS", 10)),
        )

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        pin = request.form.get("pin", "")
        if pin == str(app.config.get("ADMIN_PIN", "0000")):
            session[ADMIN_SESSION_KEY] = True
            return redirect(url_for("admin_dashboard"))

        logger.info("Rejected admin PIN attempt")
        flash("비밀번호가 틀렸습니다.", "danger")
        return redirect(url_for("index", admin="1"))

    @app.route("/admin/logout", endpoint="admin_logout")
    def admin_logout():
        session.pop(ADMIN_SESSION_KEY, None)
        return redirect(url_for("index"))

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        summary = None
        load_error = None
        try:
            summary = container.attendance_service.today_summary()
        except Exception as e:
            logger.error("Failed to load dashboard: %s", e)
            load_error = "데이터를 불러오지 못했습니다."

        today = now_local(app.config.get("SCHOOL_TIMEZONE", "Asia/Seoul")).date()
        return render_template(
            "admin.html",
            summary=summary,
            load_error=load_error,
            today_label=format_sheet_date(today),
            class_choices=DEFAULT_CLASS_CHOICES,
            override_note=ADMIN_OVERRIDE_NOTE,
        )
