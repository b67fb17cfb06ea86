import os

STORAGE_BACKEND = "memory"
STORAGE_DIR = os.getenv("STORAGE_DIR", ".hr_core_test_data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_core_test"),
}

ADVISORY_API_URL = "http://advisory.test/v1beta"
ADVISORY_MODEL = "test-model"
ADVISORY_API_KEY = "test-key"
ADVISORY_DEBOUNCE_SECONDS = 0.01
ADVISORY_TIMEOUT_SECONDS = 1.0

LOG_LEVEL = "WARNING"
LOG_JSON = False

DEBUG = False
TESTING = True
