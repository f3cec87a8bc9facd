"""Constants and defaults.

Note: Sheet titles and column layouts are shared with the people who edit
the spreadsheet by hand, so they must not change.
"""

STUDENTS_SHEET = "아이들 정보"
ATTENDANCE_SHEET = "출석기록"

# A: number, B: name, C: parent, D: phone, E: class, F: photo url
STUDENTS_HEADER = ["번호", "이름", "보호자", "연락처", "반", "사진"]
# A: timestamp, B: name, C: status, D: note, E: class
ATTENDANCE_HEADER = ["시간", "이름", "상태", "메모", "반"]

MISSING_NAME = "이름 없음"
DEFAULT_CLASS_NAME = "기타"

DEFAULT_TIMEZONE = "Asia/Seoul"
DEFAULT_CONFIRM_TIMEOUT_SECONDS = 10
DEFAULT_PHOTO_FOLDER = "학생사진"

PHOTO_CACHE_CONTROL = "public, max-age=31536000, immutable"
DEFAULT_PHOTO_MIMETYPE = "image/jpeg"

# Note written when an admin overrides a status from the dashboard
ADMIN_OVERRIDE_NOTE = "관리자에 의한 상태 변경"
