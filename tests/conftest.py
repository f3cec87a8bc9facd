from __future__ import annotations

import os
from datetime import datetime
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

import pytest

os.environ.setdefault("APP_ENV", "testing")

from church_attendance.attendance.service import AttendanceService
from church_attendance.attendance.sheets_attendance_repository import SheetsAttendanceRepository
from church_attendance.container import Container
from church_attendance.core.constants import ATTENDANCE_SHEET, STUDENTS_SHEET
from church_attendance.main import create_app
from church_attendance.photos.model import PhotoContent
from church_attendance.photos.service import PhotoService
from church_attendance.students.service import StudentService
from church_attendance.students.sheets_student_repository import SheetsStudentRepository

SEOUL = ZoneInfo("Asia/Seoul")


def _parse_range(range_: str):
    title, _, cells = range_.partition("!")
    if title.startswith("'") and title.endswith("'"):
        title = title[1:-1].replace("''", "'")
    start = cells.split(":")[0]
    digits = "".join(ch for ch in start if ch.isdigit())
    return title, int(digits) if digits else 1


class FakeSpreadsheetClient:
    """In-memory spreadsheet: one list of rows per sheet title, row 1 first."""

    def __init__(self, sheets: Optional[Dict[str, List[List[str]]]] = None):
        self.sheets: Dict[str, List[List[str]]] = {k: [list(r) for r in v] for k, v in (sheets or {}).items()}
        self.sheet_ids: Dict[str, int] = {title: i for i, title in enumerate(self.sheets)}
        self.calls: List[tuple] = []

    def get_values(self, range_: str) -> List[List[str]]:
        self.calls.append(("get", range_))
        title, start = _parse_range(range_)
        return [list(r) for r in self.sheets.get(title, [])[start - 1:]]

    def append_row(self, range_: str, row) -> None:
        self.calls.append(("append", range_, list(row)))
        title, _ = _parse_range(range_)
        self.sheets.setdefault(title, []).append([str(c) for c in row])

    def update_row(self, range_: str, row) -> None:
        self.calls.append(("update", range_, list(row)))
        title, start = _parse_range(range_)
        rows = self.sheets.setdefault(title, [])
        while len(rows) < start:
            rows.append([])
        rows[start - 1] = [str(c) for c in row]

    def sheet_titles(self) -> Dict[str, int]:
        return dict(self.sheet_ids)

    def sheet_id(self, title: str) -> Optional[int]:
        return self.sheet_ids.get(title)

    def delete_row(self, sheet_id: int, row_index: int) -> None:
        self.calls.append(("delete", sheet_id, row_index))
        title = next(t for t, i in self.sheet_ids.items() if i == sheet_id)
        del self.sheets[title][row_index]

    def add_sheet(self, title: str) -> None:
        self.calls.append(("add_sheet", title))
        self.sheets[title] = []
        self.sheet_ids[title] = len(self.sheet_ids)


class FakePhotoStorage:
    def __init__(self, files: Optional[Dict[str, PhotoContent]] = None):
        self.saved: List[dict] = []
        self.files = files or {}

    def save(self, *, name: str, content: bytes, mimetype: str) -> str:
        self.saved.append({"name": name, "content": content, "mimetype": mimetype})
        return f"https://drive.google.com/file/d/uploaded-{len(self.saved)}/view?usp=drivesdk"

    def load(self, file_id: str) -> PhotoContent:
        if file_id not in self.files:
            raise RuntimeError(f"no access to {file_id}")
        return self.files[file_id]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 12, 24, 15, 4, 5, tzinfo=SEOUL)


@pytest.fixture
def sheet() -> FakeSpreadsheetClient:
    return FakeSpreadsheetClient(
        {
            STUDENTS_SHEET: [
                ["번호", "이름", "보호자", "연락처", "반", "사진"],
                ["1", "김하늘", "", "", "토끼반", ""],
                ["2", "이바다", "", "", "기린반", "https://drive.google.com/file/d/abc123/view"],
                ["3", "박노을", "", "", "토끼반"],
            ],
            ATTENDANCE_SHEET: [
                ["시간", "이름", "상태", "메모", "반"],
            ],
        }
    )


@pytest.fixture
def photo_storage() -> FakePhotoStorage:
    return FakePhotoStorage({"abc123": PhotoContent(content=b"\x89PNG", mimetype="image/png")})


@pytest.fixture
def container(sheet, photo_storage) -> Container:
    students_repo = SheetsStudentRepository(sheet)
    attendance_repo = SheetsAttendanceRepository(sheet)
    return Container(
        google=None,
        sheets=sheet,
        drive=None,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        photo_storage=photo_storage,
        student_service=StudentService(students_repo, photo_storage),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        photo_service=PhotoService(photo_storage),
    )


@pytest.fixture
def app(container):
    app = create_app(container=container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
