from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
# drive.file covers uploads made by the app, drive.readonly covers photos added by hand
DRIVE_SCOPES = [
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/drive.readonly",
]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def normalize_private_key(raw: str) -> str:
    """Env files often carry the PEM key with literal '\\n' and wrapping quotes."""
    return (raw or "").replace("\\n", "\n").replace('"', "")


@dataclass
class GoogleConfig:
    spreadsheet_id: str
    service_account_email: str
    private_key: str

    @classmethod
    def from_dict(cls, data: dict) -> "GoogleConfig":
        return cls(
            spreadsheet_id=str(data.get("spreadsheet_id") or ""),
            service_account_email=str(data.get("service_account_email") or ""),
            private_key=normalize_private_key(str(data.get("private_key") or "")),
        )


class GoogleServiceFactory:
    """Singleton-like factory for authenticated Google API clients.

    Note: Discovery clients are built lazily and reused, credentials refresh
    their own access tokens.
    """

    _instance: Optional["GoogleServiceFactory"] = None

    def __init__(self, config: GoogleConfig):
        self._config = config
        self._sheets: Any = None
        self._drive: Any = None

    @classmethod
    def get_instance(cls, config: GoogleConfig) -> "GoogleServiceFactory":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = GoogleServiceFactory(config)
        return cls._instance

    @property
    def spreadsheet_id(self) -> str:
        return self._config.spreadsheet_id

    def _credentials(self, scopes: list[str]) -> Credentials:
        if not self._config.service_account_email or not self._config.private_key:
            raise ConfigurationError("Google service account credentials not configured")
        info = {
            "type": "service_account",
            "client_email": self._config.service_account_email,
            "private_key": self._config.private_key,
            "token_uri": TOKEN_URI,
        }
        return Credentials.from_service_account_info(info, scopes=scopes)

    def sheets(self):
        if self._sheets is None:
            logger.debug("Building Sheets v4 client for %s", self._config.service_account_email)
            self._sheets = build(
                "sheets", "v4", credentials=self._credentials(SHEETS_SCOPES), cache_discovery=False
            )
        return self._sheets

    def drive(self):
        if self._drive is None:
            logger.debug("Building Drive v3 client for %s", self._config.service_account_email)
            self._drive = build(
                "drive", "v3", credentials=self._credentials(DRIVE_SCOPES), cache_discovery=False
            )
        return self._drive
