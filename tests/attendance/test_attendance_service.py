from datetime import datetime, timedelta

import pytest

from church_attendance.attendance.model import AttendanceRecord
from church_attendance.attendance.service import AttendanceService, latest_for_day
from church_attendance.attendance.sheets_attendance_repository import SheetsAttendanceRepository
from church_attendance.core.constants import ATTENDANCE_SHEET
from church_attendance.core.exceptions import ValidationError
from church_attendance.students.sheets_student_repository import SheetsStudentRepository


def _service(sheet):
    return AttendanceService(SheetsAttendanceRepository(sheet), SheetsStudentRepository(sheet))


def _log(sheet):
    return sheet.sheets[ATTENDANCE_SHEET]


def test_first_checkin_of_the_day_appends(sheet, fixed_now):
    _service(sheet).record(name="김하늘", class_name="토끼반", status="present", now=fixed_now)

    assert _log(sheet)[-1] == ["2024. 12. 24. 오후 3:04:05", "김하늘", "출석", "", "토끼반"]
    assert sheet.calls[-1][0] == "append"
    assert sheet.calls[-1][1] == "'출석기록'!A:E"


def test_second_record_same_day_updates_in_place(sheet, fixed_now):
    svc = _service(sheet)
    svc.record(name="김하늘", class_name="토끼반", status="present", now=fixed_now)
    svc.record(name="김하늘", class_name="토끼반", status="cancelled", note="조퇴", now=fixed_now + timedelta(minutes=30))

    assert len(_log(sheet)) == 2
    assert _log(sheet)[1] == ["2024. 12. 24. 오후 3:34:05", "김하늘", "취소", "조퇴", "토끼반"]
    assert sheet.calls[-1] == ("update", "'출석기록'!A2:E2", _log(sheet)[1])


def test_yesterdays_row_is_not_reused(sheet, fixed_now):
    _log(sheet).append(["2024. 12. 23. 오전 10:00:00", "김하늘", "출석", "", "토끼반"])

    _service(sheet).record(name="김하늘", class_name="토끼반", now=fixed_now)

    assert len(_log(sheet)) == 3
    assert _log(sheet)[1][0].startswith("2024. 12. 23.")


def test_update_targets_latest_matching_row(sheet, fixed_now):
    _log(sheet).extend(
        [
            ["2024. 12. 24. 오전 9:00:00", "김하늘", "출석", "", "토끼반"],
            ["2024. 12. 24. 오전 9:01:00", "이바다", "출석", "", "기린반"],
            ["2024. 12. 24. 오전 9:05:00", "김하늘", "출석", "", "토끼반"],
        ]
    )

    _service(sheet).record(name="김하늘", class_name="토끼반", status="cancelled", now=fixed_now)

    assert _log(sheet)[3][2] == "취소"
    assert _log(sheet)[1][2] == "출석"


def test_record_validates_input(sheet, fixed_now):
    svc = _service(sheet)
    with pytest.raises(ValidationError):
        svc.record(name="", class_name="토끼반", now=fixed_now)
    with pytest.raises(ValidationError):
        svc.record(name="김하늘", class_name="토끼반", status="late", now=fixed_now)
    assert len(_log(sheet)) == 1


def test_list_records_newest_first(sheet):
    _log(sheet).extend(
        [
            ["2024. 12. 24. 오전 9:00:00", "김하늘", "출석", "", "토끼반"],
            ["2024. 12. 24. 오전 9:01:00", "이바다", "출석"],
        ]
    )
    records = _service(sheet).list_records()

    assert [r.name for r in records] == ["이바다", "김하늘"]
    assert records[0].to_dict() == {
        "timestamp": "2024. 12. 24. 오전 9:01:00",
        "name": "이바다",
        "status": "출석",
        "note": "",
        "className": "",
    }


def test_latest_for_day_keeps_first_seen_record():
    day = datetime(2024, 12, 24).date()
    newest_first = [
        AttendanceRecord("2024. 12. 24. 오전 10:00:00", "가", "토끼반", "취소"),
        AttendanceRecord("2024. 12. 24. 오전 9:00:00", "가", "토끼반", "출석"),
        AttendanceRecord("2024. 12. 23. 오전 9:00:00", "나", "토끼반", "출석"),
    ]
    latest = latest_for_day(newest_first, day)

    assert list(latest) == ["가"]
    assert latest["가"].is_cancelled


def test_today_summary_groups_attended_by_class(sheet, fixed_now):
    _log(sheet).extend(
        [
            ["2024. 12. 24. 오전 9:00:00", "김하늘", "출석", "", "토끼반"],
            ["2024. 12. 24. 오전 9:01:00", "이바다", "출석", "", "기린반"],
            ["2024. 12. 24. 오전 9:30:00", "이바다", "취소", "", "기린반"],
            ["2024. 12. 23. 오전 9:00:00", "박노을", "출석", "", "토끼반"],
        ]
    )
    summary = _service(sheet).today_summary(now=fixed_now)

    assert (summary.total, summary.attended_count, summary.not_attended_count) == (3, 1, 2)
    by_class = {c.class_name: c for c in summary.classes}
    assert [e.student.name for e in by_class["토끼반"].attended] == ["김하늘"]
    assert [s.name for s in by_class["토끼반"].not_attended] == ["박노을"]
    assert [s.name for s in by_class["기린반"].not_attended] == ["이바다"]

    data = summary.to_dict()
    assert data["date"] == "2024. 12. 24."
    assert data["attendedNames"] == ["김하늘"]
    assert data["classes"][1]["attended"][0]["time"] == "09:00"


def test_today_summary_ignores_unknown_names_in_counts(sheet, fixed_now):
    _log(sheet).append(["2024. 12. 24. 오전 9:00:00", "전학생", "출석", "", "사자반"])

    summary = _service(sheet).today_summary(now=fixed_now)

    assert summary.attended_count == 0
    assert summary.not_attended_count == 3
    assert summary.is_attended("전학생")
