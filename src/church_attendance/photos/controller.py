from __future__ import annotations

import logging

from flask import Flask, redirect, request

from ..container import Container
from ..core.constants import PHOTO_CACHE_CONTROL

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/image", methods=["GET"], endpoint="api_image")
    def image_proxy():
        url = request.args.get("url")
        if not url:
            return app.response_class("Missing URL parameter", status=400, mimetype="text/plain")

        try:
            photo = container.photo_service.fetch(url)
        except Exception as e:
            # e.g. the service account cannot read the file
            logger.error("Proxy error for %s: %s", url, e)
            return redirect(url)

        if photo is None:
            return redirect(url)

        response = app.response_class(photo.content, mimetype=photo.mimetype)
        response.headers["Cache-Control"] = PHOTO_CACHE_CONTROL
        return response
