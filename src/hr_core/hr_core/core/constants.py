"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

EMPLOYEES_KEY = "hr_core_employees"
JOB_POSTINGS_KEY = "hr_core_job_postings"
ONBOARDING_PLANS_KEY = "hr_core_onboarding_plans"
PERFORMANCE_REVIEWS_KEY = "hr_core_performance_reviews"
LEAVE_REQUESTS_KEY = "hr_core_leave_requests"
TIME_RECORDS_KEY = "hr_core_time_records"
SCHEDULES_KEY = "hr_core_schedules"
SESSION_KEY = "hr_core_session"

COLLECTION_KEYS = (
    EMPLOYEES_KEY,
    JOB_POSTINGS_KEY,
    ONBOARDING_PLANS_KEY,
    PERFORMANCE_REVIEWS_KEY,
    LEAVE_REQUESTS_KEY,
    TIME_RECORDS_KEY,
    SCHEDULES_KEY,
)

DEFAULT_MODULE = "dashboard"
DEFAULT_DEBOUNCE_SECONDS = 1.0
DEFAULT_ADVISORY_TIMEOUT_SECONDS = 10.0
DASHBOARD_LIST_LIMIT = 5
