"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MAX_DAILY_HOURS = 8.0
DEFAULT_BREAK_DEDUCTION_MINUTES = 30
DEFAULT_EMPLOYEE_NAME = "Unknown"

BREAK_TRIGGER_HOURS = 6.0
WEEKLY_REGULAR_CAP_HOURS = 40.0

HOURS_DECIMALS = 2
HOURS_TOLERANCE = 1e-6

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
