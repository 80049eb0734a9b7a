# controller.py: page state built from the backend data

from __future__ import annotations

from typing import List, Optional, Sequence

from aggregator import ALL_MONTHS, GroupedTransactions, Totals, group_by_month, select_scope, sort_by_date_desc, totals
from api_client import ApiError, ExpenseApiClient
from entry_form import PendingEntry, ValidationError, build_submission
from logging_setup import get_logger
from models import Transaction

logger = get_logger("controller")

ADDED_MESSAGE = "Transaction added successfully!"
NO_FILE_MESSAGE = "Please select a PDF file to upload."


class ExpenseTracker:
    """
    Owns everything the page shows. The transaction list and the grouping are
    replaced together on every load and never edited in place; after a
    successful write the whole state is thrown away and fetched again.
    """

    def __init__(self, client: Optional[ExpenseApiClient] = None):
        self.client = client or ExpenseApiClient()
        self.transactions: List[Transaction] = []
        self.grouped: GroupedTransactions = {}
        self.scope = ALL_MONTHS
        self.load_error: Optional[str] = None
        self.loaded = False

    def load(self) -> None:
        try:
            fetched = self.client.list_expenses()
        except ApiError as exc:
            logger.error("Loading transactions failed: %s", exc)
            self.transactions, self.grouped = [], {}
            self.load_error = str(exc)
            self.loaded = True
            return

        ordered = sort_by_date_desc(fetched)
        self.transactions, self.grouped = ordered, group_by_month(ordered)
        self.load_error = None
        self.loaded = True

    def reload(self) -> None:
        self.transactions, self.grouped = [], {}
        self.scope = ALL_MONTHS
        self.load_error = None
        self.loaded = False
        self.load()

    def month_options(self) -> List[str]:
        return [ALL_MONTHS, *self.grouped.keys()]

    def select(self, scope: str) -> None:
        self.scope = scope

    def visible(self) -> Sequence[Transaction]:
        return select_scope(self.scope, self.transactions, self.grouped)

    def current_totals(self) -> Totals:
        return totals(self.visible())

    def submit_entry(self, pending: PendingEntry) -> str:
        """Validates, sends and reloads. ValidationError means nothing was sent."""
        submission = build_submission(pending)
        self.client.add_expense(submission.to_payload())
        logger.info("Added %s of %s on %s", submission.category, submission.amount, submission.date)
        self.reload()
        return ADDED_MESSAGE

    def upload_statement(self, filename: Optional[str], content: Optional[bytes]) -> str:
        if not filename or content is None:
            raise ValidationError(NO_FILE_MESSAGE)
        message = self.client.upload_statement(filename, content)
        logger.info("Uploaded %s (%d bytes)", filename, len(content))
        self.reload()
        return message
