"""Transaction model and decoding of backend records.

The backend stores every field as text, so records arrive with string
amounts (``"-1200.00"``) and dates in whatever shape the importer wrote
(``"2024-03-05"`` from manual entry, ``"Mar 5, 2024"`` from PDF statements).
``decode_transactions`` is the single place where that wire data becomes
typed ``Transaction`` objects.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Union

import pandas as pd
import pydantic
from pydantic import BaseModel, ConfigDict, field_validator

from logging_setup import get_logger

logger = get_logger("models")

# Grouping key for records whose date could not be parsed.
UNKNOWN_MONTH = "unknown"


def parse_date(value: Any) -> Optional[dt.date]:
    """Parse a backend date string; returns None when it is unusable."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    if not text:
        return None
    ts = pd.to_datetime(text, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.date()


def parse_amount(value: Any) -> Decimal:
    """Parse a signed amount. Raises ValueError for anything non-numeric."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"not a number: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return amount


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str, None] = None
    date: Optional[dt.date] = None
    category: str = ""
    # None when the backend stored something that is not a number.
    amount: Optional[Decimal] = None
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return parse_date(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        try:
            return parse_amount(value)
        except ValueError:
            return None

    @field_validator("category", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return "" if value is None else str(value)

    @property
    def has_valid_date(self) -> bool:
        return self.date is not None

    @property
    def has_valid_amount(self) -> bool:
        return self.amount is not None

    @property
    def month_key(self) -> str:
        """``YYYY-MM`` for the transaction's month, or ``UNKNOWN_MONTH``."""
        if self.date is None:
            return UNKNOWN_MONTH
        return f"{self.date.year:04d}-{self.date.month:02d}"

    @property
    def is_income(self) -> bool:
        # Zero is booked as an expense.
        return self.amount is not None and self.amount > 0


def decode_transactions(records: Optional[Iterable[Any]]) -> List[Transaction]:
    """
    Turns the JSON body of ``GET /api/expenses`` into transactions.

    The backend answers ``null`` when it has no rows. Records that are not
    objects are skipped with a warning. An unparsable date or amount keeps
    the record with ``date=None`` or ``amount=None`` so the page can show a
    fallback label for it.
    """
    if not records:
        return []

    out = []
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping record %d: expected an object, got %s", idx, type(record).__name__)
            continue
        try:
            txn = Transaction.model_validate(record)
        except pydantic.ValidationError as exc:
            logger.warning("Skipping record %d (id=%r): %s", idx, record.get("id"), exc.errors()[0]["msg"])
            continue
        if not txn.has_valid_date:
            logger.warning("Record %d (id=%r) has an unreadable date %r", idx, txn.id, record.get("date"))
        if not txn.has_valid_amount:
            logger.warning("Record %d (id=%r) has an unreadable amount %r", idx, txn.id, record.get("amount"))
        out.append(txn)
    return out
