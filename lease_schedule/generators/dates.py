"""Calendar helpers for lease schedules.

Month arithmetic clamps to the last day of the target month, so a due day
of 31 lands on Feb 28 (or 29) and on Apr 30, and never rolls into the
following month.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from dateutil.relativedelta import relativedelta


def to_date(value: date | datetime | str) -> date:
    """Convert a date, datetime or ISO string to a ``date``.

    Raises
    ------
    ValueError
        If a string is not an ISO date.
    TypeError
        For unsupported types.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()
    raise TypeError(f"Unsupported date-like value: {value!r}")


def with_day(d: date, day: int) -> date:
    """Replace the day of month, clamped to the month length."""
    return d + relativedelta(day=day)


def add_months(d: date, months: int, day: int | None = None) -> date:
    """Shift ``d`` by whole calendar months.

    Parameters
    ----------
    d : date
        Base date.
    months : int
        Number of months to add (may be negative).
    day : int | None
        Target day of month. Defaults to the day of ``d``. Clamped to the
        length of the resulting month.
    """
    return d + relativedelta(months=months, day=day or d.day)


def month_label(d: date) -> str:
    """Label such as ``"August 2025"``."""
    return f"{d:%B} {d.year}"


def display_date(d: date) -> str:
    """Short display date such as ``"Aug 5, 2025"``."""
    return f"{d:%b} {d.day}, {d.year}"


def format_amount(amount: Decimal | int | float) -> str:
    """Format an amount with thousands separators.

    Whole amounts drop the fractional part (``5,000``); others keep two
    decimal places (``5,000.50``).
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if value == value.to_integral_value():
        return f"{value:,.0f}"
    return f"{value:,.2f}"
