from __future__ import annotations

from typing import Protocol

from .model import PhotoContent


class PhotoStorage(Protocol):
    def save(self, *, name: str, content: bytes, mimetype: str) -> str:
        """Store a photo and return the URL kept in the roster sheet."""
        raise NotImplementedError

    def load(self, file_id: str) -> PhotoContent:
        raise NotImplementedError
