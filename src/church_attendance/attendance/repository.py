from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_records(self) -> Sequence[AttendanceRecord]:
        """All records in sheet order (oldest first), header excluded."""
        raise NotImplementedError

    def find_row_for_day(self, *, name: str, day: date) -> Optional[int]:
        """1-based sheet row of the latest record for `name` on `day`."""
        raise NotImplementedError

    def append(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def update(self, row_number: int, record: AttendanceRecord) -> None:
        raise NotImplementedError
