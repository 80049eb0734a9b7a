"""
Manual transaction entry.

The form collects an unsigned amount and a type ("Expense" or "Income");
the sign is applied here, right before the record is sent to the backend.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from models import parse_amount

EXPENSE = "Expense"
INCOME = "Income"
CATEGORIES = [EXPENSE, INCOME]

MISSING_FIELDS_MESSAGE = "Please fill out all fields before adding."


class ValidationError(ValueError):
    """Raised for user input that must not be sent to the backend."""


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


@dataclass
class PendingEntry:
    date: Union[dt.date, str, None] = field(default_factory=dt.date.today)
    category: str = ""
    description: str = ""
    raw_amount: str = ""


@dataclass(frozen=True)
class NewTransaction:
    date: str
    category: str
    description: str
    amount: Decimal

    def to_payload(self) -> dict:
        # The backend keeps amount and date as text columns.
        return {
            "date": self.date,
            "category": self.category,
            "description": self.description,
            "amount": str(self.amount),
        }


def signed_amount(category: str, amount: Decimal) -> Decimal:
    """Expenses are stored negative; any other type keeps the amount as typed."""
    if category == EXPENSE:
        return -amount
    return amount


def build_submission(pending: PendingEntry) -> NewTransaction:
    date_text = _text(pending.date).strip()
    category = _text(pending.category)
    description = _text(pending.description)
    raw_amount = _text(pending.raw_amount)

    if not (date_text and category.strip() and raw_amount.strip() and description.strip()):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    try:
        amount = parse_amount(raw_amount)
    except ValueError:
        raise ValidationError(f"Amount must be a number, got {raw_amount.strip()!r}.") from None

    return NewTransaction(
        date=date_text,
        category=category,
        description=description,
        amount=signed_amount(category, amount),
    )
