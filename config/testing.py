SECRET_KEY = "test-secret"

GOOGLE_CONFIG = {
    "spreadsheet_id": "test-sheet",
    "service_account_email": "tester@example.iam.gserviceaccount.com",
    "private_key": "",
}

SCHOOL_TIMEZONE = "Asia/Seoul"

ADMIN_PIN = "1234"
CONFIRM_TIMEOUT_SECONDS = 10
PHOTO_FOLDER_NAME = "학생사진"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_SHEETS = False
