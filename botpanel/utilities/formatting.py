"""
Display formatting for template values.

Spanish long dates, 24h times, weekday names and currency amounts, shared
by every variable extractor so a date reads the same whether it is a
promotion end date or today's date.

Examples:
    >>> format_date(date(2024, 10, 28))          # "28 de octubre de 2024"
    >>> format_time(datetime(2024, 10, 28, 9, 5)) # "09:05"
    >>> format_currency(Decimal("487.5"))        # "$487.50"
"""

from datetime import date, datetime
from decimal import Decimal

from botpanel.utilities.tz import to_user_date, to_user_tz

MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

# Indexed by day-of-week number, 0 = Sunday
WEEKDAYS = ("Domingo", "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado")

CURRENCY_SYMBOL = "$"


def format_date(value: date | datetime) -> str:
    """Long Spanish date, e.g. '28 de octubre de 2024'."""
    d = to_user_date(value)
    return f"{d.day} de {MONTHS[d.month - 1]} de {d.year}"


def format_time(value: datetime) -> str:
    """Hour and minute on a 24h clock, e.g. '14:30'."""
    if value.tzinfo is not None:
        value = to_user_tz(value)
    return value.strftime("%H:%M")


def day_of_week(value: date | datetime) -> int:
    """Day-of-week number with 0 = Sunday (Python's weekday() has 0 = Monday)."""
    return value.isoweekday() % 7


def weekday_name(value: date | datetime) -> str:
    """Spanish weekday name, e.g. 'Lunes'."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = to_user_tz(value)
    return WEEKDAYS[day_of_week(value)]


def format_currency(amount: Decimal | float | int) -> str:
    """Currency amount with thousands separators and two decimals."""
    return f"{CURRENCY_SYMBOL}{Decimal(str(amount)):,.2f}"


def format_count(count: int, unit: str) -> str:
    """Count followed by its unit, e.g. '250 puntos'."""
    return f"{count} {unit}"
