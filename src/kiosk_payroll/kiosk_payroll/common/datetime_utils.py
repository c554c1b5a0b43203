from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

from ..core.exceptions import ValidationError

TimestampLike = Union[datetime, str, int, float]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_local(moment: datetime) -> datetime:
    """The same instant as an aware datetime in the local timezone.

    Naive values are taken to be local wall-clock time already.
    """
    return moment.astimezone()


def coerce_timestamp(value: TimestampLike) -> datetime:
    """Accept a datetime, an ISO-8601 string or epoch milliseconds.

    The result is always aware and in local time, so punches from different
    sources compare with each other and fall on local calendar days.
    """
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, bool):
        raise ValidationError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return to_local(datetime.fromtimestamp(value / 1000.0))
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return to_local(datetime.fromisoformat(text))
        except ValueError:
            raise ValidationError(f"Invalid timestamp: {value!r}")
    raise ValidationError(f"Invalid timestamp: {value!r}")


def coerce_date(value: Union[date, str, None]) -> date | None:
    if value is None or isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    text = str(value).strip()
    if not text:
        return None
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours from start to end; negative when end precedes start."""
    return (end - start).total_seconds() / 3600.0


def week_start(moment: datetime) -> datetime:
    """Monday 00:00 local time of the week containing moment."""
    moment = to_local(moment)
    monday = moment.date() - timedelta(days=moment.weekday())
    return datetime.combine(monday, time.min).astimezone()
