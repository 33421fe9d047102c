"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_SECONDS = 3600
TOKEN_SALT = "kintai-access-token"

DEFAULT_PAID_LEAVE_DAYS = 20
DEFAULT_SALARY = 0

CLOCK_IN_NOTE = "出勤"
DEFAULT_APPROVER_EMAIL = "admin@company.com"

# Column widths from database/schema.sql
MAX_EMAIL_LENGTH = 255
MAX_USER_NAME_LENGTH = 100
MAX_LEAVE_TYPE_LENGTH = 50
MAX_REASON_LENGTH = 500
