"""Timezone helpers.

All user-facing dates and times are rendered in the configured user
timezone (Config.USER_TIMEZONE).
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from botpanel.config import get_user_timezone


def now_user() -> datetime:
    """Current instant in the user timezone."""
    return datetime.now(get_user_timezone())


def to_user_tz(dt: datetime) -> datetime:
    """Convert a datetime to the user timezone.

    Naive datetimes are assumed to be UTC (Supabase timestamps without an
    offset are stored in UTC).
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.astimezone(get_user_timezone())


def to_user_date(value: date | datetime) -> date:
    """Calendar date as the user sees it.

    Plain dates pass through unchanged; datetimes are shifted to the user
    timezone before taking the date part.
    """
    if isinstance(value, datetime):
        return to_user_tz(value).date()
    return value
