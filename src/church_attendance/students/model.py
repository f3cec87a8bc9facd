from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.constants import DEFAULT_CLASS_NAME


@dataclass(frozen=True)
class Student:
    """Domain entity: one roster row.

    Note: Parent and phone columns stay in the sheet and are never read.
    """

    student_id: str
    name: str
    class_name: str
    photo_url: str = ""

    @property
    def group_name(self) -> str:
        return self.class_name or DEFAULT_CLASS_NAME

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "className": self.class_name,
            "photoUrl": self.photo_url,
        }


@dataclass
class ClassRoster:
    """Students of one class, in sheet order."""

    class_name: str
    students: List[Student] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "className": self.class_name,
            "count": len(self.students),
            "students": [s.to_dict() for s in self.students],
        }
