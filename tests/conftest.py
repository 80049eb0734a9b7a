"""Shared fixtures: a stand-in for ``requests.Session`` and transaction builders."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional

import pytest

from api_client import ExpenseApiClient
from logging_setup import LOGGER_NAME
from models import Transaction


class StubResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: Optional[str] = None, reason: str = "OK"):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ("" if body is None else json.dumps(body))
        self.reason = reason

    def json(self):
        if self.text == "":
            raise ValueError("no JSON body")
        return json.loads(self.text)


class StubSession:
    """Records every request and answers from a queue of responses or exceptions."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[dict] = []

    def queue(self, response) -> None:
        self.responses.append(response)

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        if not self.responses:
            raise AssertionError(f"unexpected request {method} {url}")
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def client(session: StubSession) -> ExpenseApiClient:
    return ExpenseApiClient(base_url="http://backend.test", timeout=5, session=session)


@pytest.fixture
def make_txn() -> Callable[..., Transaction]:
    counter = {"n": 0}

    def _make(date: Optional[str], amount, category: str = "Expense", description: str = "") -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=counter["n"],
            date=date,
            amount=str(amount),
            category=category,
            description=description or f"txn {counter['n']}",
        )

    return _make


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo ``configure_logging`` from page runs so ``caplog`` still sees records."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
