from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, request, session, url_for

ADMIN_SESSION_KEY = "is_admin"


def is_admin() -> bool:
    return bool(session.get(ADMIN_SESSION_KEY))


def admin_required(view):
    """Gate a view behind the admin PIN session flag.

    Note: the PIN is a front-desk convenience, not authentication.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        if is_admin():
            return view(*args, **kwargs)

        if request.path.startswith("/api/"):
            return jsonify({"error": "Admin PIN required"}), 403

        flash("관리자 비밀번호를 입력해주세요.", "warning")
        return redirect(url_for("index"))

    return wrapper
