"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Sunday-based weekday numbers (0=Sunday ... 6=Saturday): Friday and Saturday.
DEFAULT_WEEKEND_WEEKDAYS = frozenset({5, 6})
DEFAULT_STANDARD_HOURS = 8.0

MIN_STANDARD_HOURS = 1
MAX_STANDARD_HOURS = 24

HOLIDAY_NAME_MIN_LENGTH = 2
LEAVE_REASON_MIN_LENGTH = 10
LEAVE_REASON_MAX_LENGTH = 500

DEFAULT_LIST_LIMIT = 200

# Longest inclusive span (in days) accepted for a working-day count or a leave request.
MAX_WORKDAY_RANGE_DAYS = 3660
