"""Utilities - logging, timezone and display formatting."""

from botpanel.utilities.formatting import (
    WEEKDAYS,
    format_count,
    format_currency,
    format_date,
    format_time,
    weekday_name,
)
from botpanel.utilities.logging import setup_logging
from botpanel.utilities.tz import now_user, to_user_date, to_user_tz

__all__ = [
    "WEEKDAYS",
    "format_count",
    "format_currency",
    "format_date",
    "format_time",
    "now_user",
    "setup_logging",
    "to_user_date",
    "to_user_tz",
    "weekday_name",
]
