from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sheets_attendance_repository import SheetsAttendanceRepository
from .core.constants import DEFAULT_PHOTO_FOLDER, DEFAULT_TIMEZONE
from .integrations.connection import GoogleConfig, GoogleServiceFactory
from .integrations.drive_client import DriveClient
from .integrations.sheets_client import SpreadsheetClient
from .photos.drive_photo_storage import DrivePhotoStorage
from .photos.service import PhotoService
from .students.service import StudentService
from .students.sheets_student_repository import SheetsStudentRepository


@dataclass(frozen=True)
class Container:
    google: GoogleServiceFactory
    sheets: SpreadsheetClient
    drive: DriveClient

    students_repo: SheetsStudentRepository
    attendance_repo: SheetsAttendanceRepository
    photo_storage: DrivePhotoStorage

    student_service: StudentService
    attendance_service: AttendanceService
    photo_service: PhotoService


def build_container(
    *,
    google_config: dict,
    tz_name: str = DEFAULT_TIMEZONE,
    photo_folder: str = DEFAULT_PHOTO_FOLDER,
) -> Container:
    config = GoogleConfig.from_dict(google_config)
    google = GoogleServiceFactory.get_instance(config)

    sheets = SpreadsheetClient(google.sheets, config.spreadsheet_id)
    drive = DriveClient(google.drive)

    students_repo = SheetsStudentRepository(sheets)
    attendance_repo = SheetsAttendanceRepository(sheets)
    photo_storage = DrivePhotoStorage(drive, folder_name=photo_folder)

    student_service = StudentService(students_repo, photo_storage, tz_name=tz_name)
    attendance_service = AttendanceService(attendance_repo, students_repo, tz_name=tz_name)
    photo_service = PhotoService(photo_storage)

    return Container(
        google=google,
        sheets=sheets,
        drive=drive,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        photo_storage=photo_storage,
        student_service=student_service,
        attendance_service=attendance_service,
        photo_service=photo_service,
    )
