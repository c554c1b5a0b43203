import os

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def env_flag(name: str, default: bool) -> bool:
    """Boolean environment variable: 1/0, true/false, yes/no or on/off."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


class Config:
    # Payroll policy defaults, used when an employee record lacks a field
    DEFAULT_MAX_DAILY_HOURS = float(os.environ.get("DEFAULT_MAX_DAILY_HOURS", "8"))
    DEFAULT_BREAK_DEDUCTION_MINUTES = float(os.environ.get("DEFAULT_BREAK_DEDUCTION_MINUTES", "30"))

    # Report run default for the "apply break deductions" checkbox
    APPLY_BREAK_DEDUCTIONS = env_flag("APPLY_BREAK_DEDUCTIONS", True)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


DEFAULT_MAX_DAILY_HOURS = Config.DEFAULT_MAX_DAILY_HOURS
DEFAULT_BREAK_DEDUCTION_MINUTES = Config.DEFAULT_BREAK_DEDUCTION_MINUTES
APPLY_BREAK_DEDUCTIONS = Config.APPLY_BREAK_DEDUCTIONS
LOG_LEVEL = Config.LOG_LEVEL

DEBUG = env_flag("DEBUG", True)
