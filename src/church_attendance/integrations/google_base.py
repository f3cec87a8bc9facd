from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


def http_error_details(error: HttpError) -> str:
    content = getattr(error, "content", b"") or b""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content)


@contextmanager
def google_call(action: str) -> Iterator[None]:
    """Translate Google client failures into StorageError.

    The API error payload is logged since the short message rarely says
    which permission or range was wrong.
    """
    try:
        yield
    except HttpError as e:
        logger.error("Google API error during %s: %s", action, http_error_details(e))
        raise StorageError(f"{action} failed: {e.reason}") from e
    except (GoogleAuthError, OSError) as e:
        logger.error("Google API transport error during %s: %s", action, e)
        raise StorageError(f"{action} failed: {e}") from e
