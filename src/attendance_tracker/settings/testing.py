import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "json"
STORAGE_KEY = "@attendance_data"
DATA_DIR = os.getenv("DATA_DIR", "data-test")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports-test")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_JSON = False

AUTO_INIT_DB = False
