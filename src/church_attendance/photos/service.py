from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import quote

from .model import PhotoContent
from .repository import PhotoStorage

logger = logging.getLogger(__name__)

# Tried in order:
#   https://drive.google.com/file/d/FILE_ID/view...
#   https://drive.google.com/open?id=FILE_ID
#   https://docs.google.com/.../d/FILE_ID/...
_FILE_ID_PATTERNS = [
    re.compile(r"/file/d/([^/]+)"),
    re.compile(r"id=([^&]+)"),
    re.compile(r"/d/([^/]+)"),
]


def extract_file_id(url: str) -> Optional[str]:
    for pattern in _FILE_ID_PATTERNS:
        match = pattern.search(url or "")
        if match and match.group(1):
            return match.group(1)
    return None


def photo_src(url: str, *, proxy_path: str = "/api/image") -> str:
    """URL a browser should load: Drive links go through the proxy."""
    if not url:
        return ""
    if "drive.google.com" in url:
        return f"{proxy_path}?url={quote(url, safe='')}"
    return url


class PhotoService:
    def __init__(self, storage: PhotoStorage):
        self._storage = storage

    def fetch(self, url: str) -> Optional[PhotoContent]:
        """Photo bytes for a Drive URL, None when the URL is not a Drive file.

        Storage failures propagate so the caller can fall back to the URL.
        """
        file_id = extract_file_id(url)
        if not file_id:
            return None
        logger.debug("Proxying Drive file %s", file_id)
        return self._storage.load(file_id)
