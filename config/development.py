import os

from config.config import env_flag

DEFAULT_MAX_DAILY_HOURS = float(os.getenv("DEFAULT_MAX_DAILY_HOURS", "8"))
DEFAULT_BREAK_DEDUCTION_MINUTES = float(os.getenv("DEFAULT_BREAK_DEDUCTION_MINUTES", "30"))

APPLY_BREAK_DEDUCTIONS = env_flag("APPLY_BREAK_DEDUCTIONS", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEBUG = True
