from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from ..common.datetime_utils import is_same_day
from ..core.constants import ATTENDANCE_SHEET
from ..integrations.sheets_client import SpreadsheetClient, a1_range
from .model import AttendanceRecord

COL_TIMESTAMP, COL_NAME, COL_STATUS, COL_NOTE, COL_CLASS = 0, 1, 2, 3, 4


def _cell(row: Sequence[str], index: int) -> str:
    return str(row[index]) if len(row) > index and row[index] is not None else ""


def row_to_record(row: Sequence[str]) -> AttendanceRecord:
    return AttendanceRecord(
        timestamp=_cell(row, COL_TIMESTAMP),
        name=_cell(row, COL_NAME),
        status=_cell(row, COL_STATUS),
        note=_cell(row, COL_NOTE),
        class_name=_cell(row, COL_CLASS),
    )


def record_to_row(record: AttendanceRecord) -> List[str]:
    return [record.timestamp, record.name, record.status, record.note or "", record.class_name]


class SheetsAttendanceRepository:
    def __init__(self, client: SpreadsheetClient, *, sheet_title: str = ATTENDANCE_SHEET):
        self._client = client
        self._title = sheet_title

    def list_records(self) -> Sequence[AttendanceRecord]:
        rows = self._client.get_values(a1_range(self._title, "A2:E"))
        return [row_to_record(r) for r in rows]

    def find_row_for_day(self, *, name: str, day: date) -> Optional[int]:
        rows = self._client.get_values(a1_range(self._title, "A:E"))
        # newest rows are at the bottom
        for i in range(len(rows) - 1, -1, -1):
            row = rows[i]
            timestamp = _cell(row, COL_TIMESTAMP)
            if timestamp and is_same_day(timestamp, day) and _cell(row, COL_NAME) == name:
                return i + 1
        return None

    def append(self, record: AttendanceRecord) -> None:
        self._client.append_row(a1_range(self._title, "A:E"), record_to_row(record))

    def update(self, row_number: int, record: AttendanceRecord) -> None:
        self._client.update_row(a1_range(self._title, f"A{row_number}:E{row_number}"), record_to_row(record))
