import os

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", ".hr_core_data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_core"),
}

# Leave-availability advisory (Gemini generateContent). Empty key disables it.
ADVISORY_API_URL = os.getenv("ADVISORY_API_URL", "https://generativelanguage.googleapis.com/v1beta")
ADVISORY_MODEL = os.getenv("ADVISORY_MODEL", "gemini-2.5-flash")
ADVISORY_API_KEY = os.getenv("ADVISORY_API_KEY", "")
ADVISORY_DEBOUNCE_SECONDS = float(os.getenv("ADVISORY_DEBOUNCE_SECONDS", "1.0"))
ADVISORY_TIMEOUT_SECONDS = float(os.getenv("ADVISORY_TIMEOUT_SECONDS", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

DEBUG = True
