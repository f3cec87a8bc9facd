from church_attendance.core.constants import ATTENDANCE_HEADER, ATTENDANCE_SHEET, STUDENTS_SHEET
from church_attendance.integrations.bootstrap import ensure_sheet_headers

from ..conftest import FakeSpreadsheetClient


def test_creates_missing_sheet_and_header():
    client = FakeSpreadsheetClient({STUDENTS_SHEET: [["번호", "이름"]]})

    touched = ensure_sheet_headers(client)

    assert touched == [ATTENDANCE_SHEET]
    assert ("add_sheet", ATTENDANCE_SHEET) in client.calls
    assert client.sheets[ATTENDANCE_SHEET] == [ATTENDANCE_HEADER]


def test_existing_headers_are_left_alone(sheet):
    before = {k: [list(r) for r in v] for k, v in sheet.sheets.items()}

    assert ensure_sheet_headers(sheet) == []
    assert sheet.sheets == before
