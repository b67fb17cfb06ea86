import os

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_DIR = os.getenv("STORAGE_DIR", "/var/lib/hr-core")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "hr_core"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_core"),
}

ADVISORY_API_URL = os.getenv("ADVISORY_API_URL", "https://generativelanguage.googleapis.com/v1beta")
ADVISORY_MODEL = os.getenv("ADVISORY_MODEL", "gemini-2.5-flash")
ADVISORY_API_KEY = os.getenv("ADVISORY_API_KEY", "")
ADVISORY_DEBOUNCE_SECONDS = float(os.getenv("ADVISORY_DEBOUNCE_SECONDS", "1.0"))
ADVISORY_TIMEOUT_SECONDS = float(os.getenv("ADVISORY_TIMEOUT_SECONDS", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

DEBUG = False
