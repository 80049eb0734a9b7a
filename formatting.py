"""
Display helpers for the expense page.

Month keys stay machine-sortable (``2024-03``); these functions turn them,
dates and amounts into the strings shown to the user. None of them raise on
bad input: a label that cannot be built falls back to something printable.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation

from models import UNKNOWN_MONTH

NBSP = "\u00a0"
UNKNOWN_DATE_LABEL = "Unknown date"
MISSING_AMOUNT_LABEL = "-"

# Month labels are English whatever the process locale is.
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def month_start(key: str) -> dt.date:
    """First day of the month named by ``YYYY-MM``. Raises ValueError otherwise."""
    year_text, _, month_text = key.partition("-")
    if len(year_text) != 4 or len(month_text) != 2 or not (year_text.isdigit() and month_text.isdigit()):
        raise ValueError(f"not a month key: {key!r}")
    return dt.date(int(year_text), int(month_text), 1)


def month_label(key: str) -> str:
    """``"2024-03"`` -> ``"March 2024"``."""
    if key == UNKNOWN_MONTH:
        return UNKNOWN_DATE_LABEL
    if not isinstance(key, str):
        return str(key)
    try:
        first = month_start(key)
    except ValueError:
        return str(key)
    return f"{MONTH_NAMES[first.month - 1]} {first.year:04d}"


def currency(amount) -> str:
    """
    Forint amount the way hu-HU renders HUF: ``-1 234 567,50 Ft``.

    Thousands are separated by a non-breaking space, the decimal separator is
    a comma and the sign leads. This is presentation only; no conversion
    happens. ``None`` and other non-numbers render as ``"-"``.
    """
    if amount is None:
        return MISSING_AMOUNT_LABEL
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return MISSING_AMOUNT_LABEL
    if not value.is_finite():
        return MISSING_AMOUNT_LABEL

    digits = f"{abs(value):,.2f}"
    digits = digits.replace(",", NBSP).replace(".", ",")
    # Decimal keeps the sign of -0.00
    sign = "-" if value < 0 and digits != "0,00" else ""
    return f"{sign}{digits}{NBSP}Ft"


def date_label(value) -> str:
    if value is None:
        return UNKNOWN_DATE_LABEL
    if isinstance(value, dt.datetime):
        value = value.date()
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)
