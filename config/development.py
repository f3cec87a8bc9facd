import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

GOOGLE_CONFIG = {
    "spreadsheet_id": os.getenv("GOOGLE_SHEET_ID", ""),
    "service_account_email": os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL", ""),
    "private_key": os.getenv("GOOGLE_PRIVATE_KEY", ""),
}

SCHOOL_TIMEZONE = os.getenv("SCHOOL_TIMEZONE", "Asia/Seoul")

# 4-digit PIN guarding the admin dashboard
ADMIN_PIN = os.getenv("ADMIN_PIN", "0000")
CONFIRM_TIMEOUT_SECONDS = int(os.getenv("CONFIRM_TIMEOUT_SECONDS", "10"))
PHOTO_FOLDER_NAME = os.getenv("PHOTO_FOLDER_NAME", "학생사진")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app writes the header rows of both sheets on startup (idempotent)
AUTO_INIT_SHEETS = bool(int(os.getenv("AUTO_INIT_SHEETS", "0")))
