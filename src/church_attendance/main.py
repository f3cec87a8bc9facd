from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .attendance.controller import register as register_attendance
from .common.logging_utils import configure_logging
from .common.responses import error_response
from .container import Container, build_container
from .core.constants import DEFAULT_CONFIRM_TIMEOUT_SECONDS, DEFAULT_PHOTO_FOLDER, DEFAULT_TIMEZONE
from .core.exceptions import DomainError
from .integrations.bootstrap import ensure_sheet_headers
from .pages.controller import register as register_pages
from .photos.controller import register as register_photos
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    `container` lets tests inject in-memory repositories.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ADMIN_PIN"] = str(getattr(settings, "ADMIN_PIN", "0000"))
    app.config["SCHOOL_TIMEZONE"] = getattr(settings, "SCHOOL_TIMEZONE", DEFAULT_TIMEZONE)
    app.config["CONFIRM_TIMEOUT_SECONDS"] = int(
        getattr(settings, "CONFIRM_TIMEOUT_SECONDS", DEFAULT_CONFIRM_TIMEOUT_SECONDS)
    )
    google_config = dict(getattr(settings, "GOOGLE_CONFIG", {}))

    logger.info(
        "settings=%s spreadsheet=%s", settings_module, google_config.get("spreadsheet_id") or "<not configured>"
    )

    if container is None:
        container = build_container(
            google_config=google_config,
            tz_name=app.config["SCHOOL_TIMEZONE"],
            photo_folder=getattr(settings, "PHOTO_FOLDER_NAME", DEFAULT_PHOTO_FOLDER),
        )

        if bool(getattr(settings, "AUTO_INIT_SHEETS", False)):
            touched = ensure_sheet_headers(container.sheets)
            logger.info("sheets ready (headers written: %s)", ", ".join(touched) or "none")

    app.extensions["church_attendance"] = container

    register_pages(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_photos(app, container)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response("Request failed", e)

    return app
