import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GOOGLE_CONFIG = {
    "spreadsheet_id": os.getenv("GOOGLE_SHEET_ID", ""),
    "service_account_email": os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL", ""),
    "private_key": os.getenv("GOOGLE_PRIVATE_KEY", ""),
}

SCHOOL_TIMEZONE = os.getenv("SCHOOL_TIMEZONE", "Asia/Seoul")

ADMIN_PIN = os.getenv("ADMIN_PIN", "0000")
CONFIRM_TIMEOUT_SECONDS = int(os.getenv("CONFIRM_TIMEOUT_SECONDS", "10"))
PHOTO_FOLDER_NAME = os.getenv("PHOTO_FOLDER_NAME", "학생사진")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_SHEETS = bool(int(os.getenv("AUTO_INIT_SHEETS", "0")))
