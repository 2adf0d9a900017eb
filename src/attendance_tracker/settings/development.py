import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "json" keeps the profile in DATA_DIR; "mysql" uses the kv_store table.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "@attendance_data")
DATA_DIR = os.getenv("DATA_DIR", "data")
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# If enabled (mysql backend only), create the kv_store table on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
