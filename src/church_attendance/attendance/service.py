from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import format_sheet_timestamp, is_same_day, now_local
from ..common.validators import optional_text, require_status
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from ..students.service import group_by_class
from .model import AttendanceRecord, AttendanceSummary, AttendedEntry, ClassAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def latest_for_day(records_newest_first: Sequence[AttendanceRecord], day: date) -> Dict[str, AttendanceRecord]:
    """Per name, the first (= most recent) record whose timestamp falls on `day`."""
    latest: Dict[str, AttendanceRecord] = {}
    for record in records_newest_first:
        if record.name in latest or not is_same_day(record.timestamp, day):
            continue
        latest[record.name] = record
    return latest


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        tz_name: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._students = students
        self._tz_name = tz_name

    def _now(self, now: Optional[datetime]) -> datetime:
        return now or now_local(self._tz_name)

    def record(
        self,
        *,
        name: Optional[str],
        class_name: Optional[str],
        status: Optional[str] = AttendanceStatus.PRESENT.value,
        note: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Mark (or override) today's status for a student.

        Today's row for the student is updated in place, otherwise a row is appended.
        Note: read-modify-write without locking; two simultaneous check-ins can
        both append.
        """
        name, class_name = optional_text(name), optional_text(class_name)
        if not name or not class_name:
            raise ValidationError("Name and Class are required")
        status_enum = require_status(status)

        now = self._now(now)
        record = AttendanceRecord(
            timestamp=format_sheet_timestamp(now),
            name=name,
            class_name=class_name,
            status=status_enum.value,
            note=optional_text(note),
        )

        row_number = self._attendance.find_row_for_day(name=name, day=now.date())
        if row_number is not None:
            self._attendance.update(row_number, record)
            logger.info("Updated attendance row %d: %s -> %s", row_number, name, status_enum.alias)
        else:
            self._attendance.append(record)
            logger.info("Appended attendance: %s (%s) -> %s", name, class_name, status_enum.alias)
        return record

    def list_records(self) -> List[AttendanceRecord]:
        """Newest first."""
        return list(reversed(self._attendance.list_records()))

    def today_summary(self, *, now: Optional[datetime] = None) -> AttendanceSummary:
        day = self._now(now).date()
        latest = latest_for_day(self.list_records(), day)
        students = list(self._students.list_all())

        classes: List[ClassAttendance] = []
        attended_count = 0
        for roster in group_by_class(students):
            group = ClassAttendance(class_name=roster.class_name)
            for student in roster.students:
                record = latest.get(student.name)
                if record is not None and not record.is_cancelled:
                    group.attended.append(AttendedEntry(student=student, record=record))
                    attended_count += 1
                else:
                    group.not_attended.append(student)
            classes.append(group)

        return AttendanceSummary(
            day=day,
            total=len(students),
            attended_count=attended_count,
            classes=classes,
            latest_by_name=latest,
        )
