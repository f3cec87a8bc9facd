from __future__ import annotations

from ..core.constants import DEFAULT_PHOTO_FOLDER
from ..integrations.drive_client import DriveClient
from .model import PhotoContent


class DrivePhotoStorage:
    """Student photos kept in one Drive folder, created on first upload."""

    def __init__(self, drive: DriveClient, *, folder_name: str = DEFAULT_PHOTO_FOLDER):
        self._drive = drive
        self._folder_name = folder_name

    def save(self, *, name: str, content: bytes, mimetype: str) -> str:
        folder_id = self._drive.ensure_folder(self._folder_name)
        uploaded = self._drive.upload(name=name, parent_id=folder_id, content=content, mimetype=mimetype)
        return uploaded.web_view_link

    def load(self, file_id: str) -> PhotoContent:
        downloaded = self._drive.download(file_id)
        return PhotoContent(content=downloaded.content, mimetype=downloaded.mimetype)
