import pytest

from church_attendance.common.validators import require_non_empty, require_status
from church_attendance.core.enums import AttendanceStatus
from church_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["출석", "present", "PRESENT", " present "])
def test_status_accepts_sheet_value_and_alias(value):
    assert require_status(value) is AttendanceStatus.PRESENT


def test_status_cancelled_alias():
    assert require_status("cancelled") is AttendanceStatus.CANCELLED
    assert require_status("취소") is AttendanceStatus.CANCELLED


@pytest.mark.parametrize("value", ["", None, "late"])
def test_invalid_status_raises(value):
    with pytest.raises(ValidationError):
        require_status(value)


def test_require_non_empty_strips():
    assert require_non_empty("  김하늘 ", "Name") == "김하늘"
    with pytest.raises(ValidationError, match="Name is required"):
        require_non_empty("   ", "Name")
