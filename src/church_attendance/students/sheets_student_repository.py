from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import MISSING_NAME, STUDENTS_SHEET
from ..core.exceptions import NotFoundError, StorageError
from ..integrations.sheets_client import SpreadsheetClient, a1_range
from .model import Student

COL_ID, COL_NAME, COL_CLASS, COL_PHOTO = 0, 1, 4, 5


def _cell(row: Sequence[str], index: int) -> str:
    return str(row[index]) if len(row) > index and row[index] is not None else ""


def row_to_student(row: Sequence[str]) -> Student:
    return Student(
        student_id=_cell(row, COL_ID),
        name=_cell(row, COL_NAME) or MISSING_NAME,
        class_name=_cell(row, COL_CLASS),
        photo_url=_cell(row, COL_PHOTO),
    )


def student_to_row(student: Student) -> List[str]:
    # Parent / phone columns are left blank
    return [student.student_id, student.name, "", "", student.class_name, student.photo_url]


class SheetsStudentRepository:
    def __init__(self, client: SpreadsheetClient, *, sheet_title: str = STUDENTS_SHEET):
        self._client = client
        self._title = sheet_title

    def list_all(self) -> Sequence[Student]:
        rows = self._client.get_values(a1_range(self._title, "A2:F"))
        return [row_to_student(r) for r in rows]

    def add(self, student: Student) -> None:
        self._client.append_row(a1_range(self._title, "A:F"), student_to_row(student))

    def find_row_index(self, *, name: str, class_name: Optional[str] = None) -> Optional[int]:
        rows = self._client.get_values(a1_range(self._title, "A:F"))
        if not rows:
            raise NotFoundError("No data found")

        for i, row in enumerate(rows):
            if _cell(row, COL_NAME) == name and (not class_name or _cell(row, COL_CLASS) == class_name):
                return i
        return None

    def delete_row(self, row_index: int) -> None:
        sheet_id = self._client.sheet_id(self._title)
        if sheet_id is None:
            raise StorageError("Sheet not found")
        self._client.delete_row(sheet_id, row_index)
