from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module
from config.config import Config

from .container import Container, build_container
from .employees.repository import EmployeeRepository
from .punches.repository import PunchRepository

SETTING_NAMES = (
    "DEFAULT_MAX_DAILY_HOURS",
    "DEFAULT_BREAK_DEDUCTION_MINUTES",
    "APPLY_BREAK_DEDUCTIONS",
    "LOG_LEVEL",
    "DEBUG",
)


def load_settings() -> dict:
    """Read the active settings module; names it omits fall back to config.Config."""
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    return {name: getattr(settings, name, getattr(Config, name, None)) for name in SETTING_NAMES}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_engine(*, punches: PunchRepository, employees: EmployeeRepository) -> Container:
    settings = load_settings()
    configure_logging(settings["LOG_LEVEL"])

    if settings.get("DEBUG"):
        logging.getLogger(__name__).debug(
            f"[kiosk-payroll] settings={get_settings_module()} "
            f"apply_break_deductions={settings['APPLY_BREAK_DEDUCTIONS']}"
        )

    return build_container(punches=punches, employees=employees, settings=settings)
