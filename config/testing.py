DEFAULT_MAX_DAILY_HOURS = 8.0
DEFAULT_BREAK_DEDUCTION_MINUTES = 30.0

APPLY_BREAK_DEDUCTIONS = True

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True
