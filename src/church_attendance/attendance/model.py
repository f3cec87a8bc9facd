from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from ..common.datetime_utils import clock_label, format_sheet_date
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance log row.

    `status` keeps the raw sheet text, so hand-edited rows survive a round trip.
    """

    timestamp: str
    name: str
    class_name: str
    status: str
    note: str = ""

    @property
    def is_cancelled(self) -> bool:
        return self.status == AttendanceStatus.CANCELLED.value

    @property
    def time_label(self) -> str:
        return clock_label(self.timestamp)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "name": self.name,
            "status": self.status,
            "note": self.note,
            "className": self.class_name,
        }


@dataclass(frozen=True)
class AttendedEntry:
    student: Student
    record: AttendanceRecord

    def to_dict(self) -> dict:
        return {
            "student": self.student.to_dict(),
            "log": self.record.to_dict(),
            "time": self.record.time_label,
        }


@dataclass
class ClassAttendance:
    class_name: str
    attended: List[AttendedEntry] = field(default_factory=list)
    not_attended: List[Student] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.attended) + len(self.not_attended)

    def to_dict(self) -> dict:
        return {
            "className": self.class_name,
            "total": self.total,
            "attended": [e.to_dict() for e in self.attended],
            "notAttended": [s.to_dict() for s in self.not_attended],
        }


@dataclass
class AttendanceSummary:
    """Read-model for the admin dashboard: today's attendance by class."""

    day: date
    total: int
    attended_count: int
    classes: List[ClassAttendance]
    latest_by_name: Dict[str, AttendanceRecord]

    @property
    def not_attended_count(self) -> int:
        return self.total - self.attended_count

    def is_attended(self, name: str) -> bool:
        record = self.latest_by_name.get(name)
        return record is not None and not record.is_cancelled

    def to_dict(self) -> dict:
        return {
            "date": format_sheet_date(self.day),
            "total": self.total,
            "attended": self.attended_count,
            "notAttended": self.not_attended_count,
            "attendedNames": sorted(n for n in self.latest_by_name if self.is_attended(n)),
            "classes": [c.to_dict() for c in self.classes],
        }
