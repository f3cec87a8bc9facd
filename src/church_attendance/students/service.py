from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import NotFoundError, ValidationError
from ..photos.model import PhotoUpload
from ..photos.repository import PhotoStorage
from .model import ClassRoster, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def group_by_class(students: List[Student]) -> List[ClassRoster]:
    """Classes sorted by name; students keep their sheet order."""
    groups: Dict[str, ClassRoster] = {}
    for student in students:
        key = student.group_name
        if key not in groups:
            groups[key] = ClassRoster(class_name=key)
        groups[key].students.append(student)
    return [groups[k] for k in sorted(groups)]


class StudentService:
    def __init__(
        self,
        students: StudentRepository,
        photos: PhotoStorage,
        *,
        tz_name: str = DEFAULT_TIMEZONE,
    ):
        self._students = students
        self._photos = photos
        self._tz_name = tz_name

    def list_students(self) -> List[Student]:
        return list(self._students.list_all())

    def roster_by_class(self) -> List[ClassRoster]:
        return group_by_class(self.list_students())

    def add_student(
        self,
        *,
        name: Optional[str],
        class_name: Optional[str],
        photo: Optional[PhotoUpload] = None,
        now: Optional[datetime] = None,
    ) -> Student:
        name, class_name = optional_text(name), optional_text(class_name)
        if not name or not class_name:
            raise ValidationError("Name and Class are required")

        now = now or now_local(self._tz_name)
        stamp = str(int(now.timestamp() * 1000))

        photo_url = ""
        if photo is not None and not photo.is_empty:
            photo_url = self._photos.save(
                name=f"{name}_{stamp}.jpg",
                content=photo.content,
                mimetype=photo.mimetype,
            )

        student = Student(student_id=stamp, name=name, class_name=class_name, photo_url=photo_url)
        self._students.add(student)
        logger.info("Added student %s (%s)", name, class_name)
        return student

    def remove_student(self, *, name: Optional[str], class_name: Optional[str] = None) -> None:
        name = require_non_empty(name, "Name")
        class_name = optional_text(class_name) or None

        row_index = self._students.find_row_index(name=name, class_name=class_name)
        if row_index is None:
            raise NotFoundError("Student not found")

        self._students.delete_row(row_index)
        logger.info("Removed student %s (%s) at row %d", name, class_name or "-", row_index)
