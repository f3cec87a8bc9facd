from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the spreadsheet."""

    PRESENT = "출석"
    CANCELLED = "취소"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        """Accept the sheet value or its English alias ('present', 'cancelled')."""
        raw = (value or "").strip()
        for status in cls:
            if raw == status.value or raw.lower() == status.name.lower():
                return status
        raise ValueError(f"Unknown attendance status: {value!r}")

    @property
    def alias(self) -> str:
        return self.name.lower()
