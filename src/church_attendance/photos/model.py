from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_PHOTO_MIMETYPE


@dataclass(frozen=True)
class PhotoUpload:
    """Photo received from the add-student form."""

    filename: str
    content: bytes
    mimetype: str = DEFAULT_PHOTO_MIMETYPE

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class PhotoContent:
    content: bytes
    mimetype: str = DEFAULT_PHOTO_MIMETYPE
