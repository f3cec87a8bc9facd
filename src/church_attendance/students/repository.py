from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for the roster.

    Note: the service layer depends on this interface, not on the spreadsheet.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError

    def find_row_index(self, *, name: str, class_name: Optional[str] = None) -> Optional[int]:
        """0-based row index (header included) of the first matching student.

        Raises NotFoundError when the sheet holds no rows at all.
        """
        raise NotImplementedError

    def delete_row(self, row_index: int) -> None:
        raise NotImplementedError
