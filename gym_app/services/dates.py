"""Calendar-day policy.

Writer and reader both go through these helpers so "today" and the bounds
of a day are always computed in the configured APP_TIMEZONE.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from flask import current_app

from .errors import ValidationError


def app_timezone():
    return ZoneInfo(current_app.config.get("APP_TIMEZONE") or "UTC")


def local_today():
    return datetime.now(app_timezone()).date()


def day_bounds(day):
    """Half-open [start, next start) of a calendar day."""
    day = to_date(day)
    return day, day + timedelta(days=1)


def to_date(value):
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(app_timezone())
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected a date, got {type(value).__name__}")


def parse_day(raw, default=None):
    """Parse YYYY-MM-DD (a longer ISO timestamp is cut to its date part)."""
    if raw is None or str(raw).strip() == "":
        return default if default is not None else local_today()
    try:
        return date.fromisoformat(str(raw).strip()[:10])
    except ValueError:
        raise ValidationError(f"Invalid date: {raw!r} (expected YYYY-MM-DD)")
