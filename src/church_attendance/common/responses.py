from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import DomainError, StorageError

logger = logging.getLogger(__name__)


def error_response(action: str, error: Exception):
    """JSON error body shared by the API controllers.

    Rule violations answer with their own message and status; storage and
    unexpected failures answer 500 with `action` and the caught message.
    """
    if isinstance(error, DomainError) and not isinstance(error, StorageError):
        status = error.status_code
        if status >= 500:
            logger.error("%s: %s", action, error)
        return jsonify({"error": str(error)}), status

    if isinstance(error, StorageError):
        logger.error("%s: %s", action, error)
    else:
        logger.exception("%s", action)
    return jsonify({"error": action, "details": str(error)}), 500
