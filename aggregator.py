# aggregator.py: month buckets and income/expense totals

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

import pandas as pd

from formatting import currency, date_label
from models import UNKNOWN_MONTH, Transaction

ALL_MONTHS = "all"

GroupedTransactions = Dict[str, List[Transaction]]


@dataclass(frozen=True)
class Totals:
    income: Decimal = Decimal(0)
    # Sum of the non-positive amounts, so it is zero or negative.
    expense: Decimal = Decimal(0)

    @property
    def net(self) -> Decimal:
        return self.income + self.expense


def sort_by_date_desc(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Newest first; undated records go last. Equal dates keep input order."""
    txns = list(transactions)
    dated = [t for t in txns if t.date is not None]
    undated = [t for t in txns if t.date is None]
    dated.sort(key=lambda t: t.date, reverse=True)
    return dated + undated


def group_by_month(transactions: Iterable[Transaction]) -> GroupedTransactions:
    """
    Buckets transactions by ``YYYY-MM``.

    Keys appear in the order their first transaction was seen and each bucket
    keeps the input order, so a newest-first input gives newest-first months.
    """
    groups: GroupedTransactions = {}
    for txn in transactions:
        key = txn.month_key
        if key not in groups:
            groups[key] = []
        groups[key].append(txn)
    return groups


def select_scope(scope: str, all_transactions: Sequence[Transaction], grouped: GroupedTransactions) -> Sequence[Transaction]:
    if scope == ALL_MONTHS:
        return all_transactions
    return grouped.get(scope, [])


def totals(transactions: Iterable[Transaction]) -> Totals:
    income = Decimal(0)
    expense = Decimal(0)
    for txn in transactions:
        # Unreadable amounts are shown but not counted.
        if not txn.has_valid_amount:
            continue
        if txn.is_income:
            income += txn.amount
        else:
            expense += txn.amount
    return Totals(income=income, expense=expense)


def monthly_summary(grouped: GroupedTransactions) -> pd.DataFrame:
    """
    One row per month with Income, Expense (as a positive figure) and Net,
    oldest month first. The ``unknown`` bucket is left out.
    """
    rows = []
    for key in sorted(k for k in grouped if k != UNKNOWN_MONTH):
        t = totals(grouped[key])
        rows.append({
            "Month": key,
            "Income": float(t.income),
            "Expense": float(abs(t.expense)),
            "Net": float(t.net),
        })
    return pd.DataFrame(rows, columns=["Month", "Income", "Expense", "Net"])


def to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """
    Table rows for display with formatted date and amount. ``Signed`` keeps
    the numeric amount for colouring and is empty when the amount is unreadable.
    """
    columns = ["Date", "Description", "Amount (HUF)", "Category", "Signed"]
    if not transactions:
        return pd.DataFrame(columns=columns)

    data = [{
        "Date": date_label(t.date),
        "Description": t.description,
        "Amount (HUF)": currency(t.amount),
        "Category": t.category,
        "Signed": float(t.amount) if t.has_valid_amount else None,
    } for t in transactions]
    return pd.DataFrame(data, columns=columns)
