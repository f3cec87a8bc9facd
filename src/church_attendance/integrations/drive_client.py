from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from googleapiclient.http import MediaIoBaseUpload

from ..core.constants import DEFAULT_PHOTO_MIMETYPE
from .google_base import google_call

logger = logging.getLogger(__name__)

FOLDER_MIMETYPE = "application/vnd.google-apps.folder"


@dataclass(frozen=True)
class DriveFile:
    file_id: str
    web_view_link: str


@dataclass(frozen=True)
class DriveContent:
    content: bytes
    mimetype: str


def _escape_query(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


class DriveClient:
    """Thin wrapper over the Drive v3 `files` resource."""

    def __init__(self, service: Callable[[], Any]):
        self._service = service

    def find_folder(self, name: str) -> Optional[str]:
        query = f"mimeType='{FOLDER_MIMETYPE}' and name='{_escape_query(name)}' and trashed=false"
        with google_call(f"search folder {name}"):
            result = self._service().files().list(q=query, fields="files(id, name)").execute()
        files = result.get("files", []) or []
        return files[0]["id"] if files else None

    def create_folder(self, name: str) -> str:
        with google_call(f"create folder {name}"):
            folder = (
                self._service().files()
                .create(body={"name": name, "mimeType": FOLDER_MIMETYPE}, fields="id")
                .execute()
            )
        logger.info("Created Drive folder %s (%s)", name, folder["id"])
        return folder["id"]

    def ensure_folder(self, name: str) -> str:
        return self.find_folder(name) or self.create_folder(name)

    def upload(self, *, name: str, parent_id: str, content: bytes, mimetype: str) -> DriveFile:
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mimetype or DEFAULT_PHOTO_MIMETYPE)
        with google_call(f"upload {name}"):
            created = (
                self._service().files()
                .create(
                    body={"name": name, "parents": [parent_id]},
                    media_body=media,
                    fields="id, webViewLink",
                )
                .execute()
            )
        logger.info("Uploaded %s to Drive (%s)", name, created.get("id"))
        return DriveFile(file_id=created.get("id", ""), web_view_link=created.get("webViewLink", "") or "")

    def download(self, file_id: str) -> DriveContent:
        with google_call(f"download {file_id}"):
            meta = self._service().files().get(fileId=file_id, fields="mimeType").execute()
            content = self._service().files().get_media(fileId=file_id).execute()
        return DriveContent(content=content, mimetype=meta.get("mimeType") or DEFAULT_PHOTO_MIMETYPE)
