"""
api_client.py
-------------
Thin wrapper over the expense backend's HTTP endpoints:

    GET  /api/expenses   all stored transactions
    POST /api/expenses   add one transaction (JSON body)
    POST /api/upload     import a PDF statement (multipart field ``file``)

Every transport or HTTP failure surfaces as ``ApiError`` so the page can
show a message instead of crashing.
"""

from __future__ import annotations

from typing import List, Optional

import requests

import config
from logging_setup import get_logger
from models import Transaction, decode_transactions

logger = get_logger("api_client")

EXPENSES_PATH = "/api/expenses"
UPLOAD_PATH = "/api/upload"


class ApiError(RuntimeError):
    """The backend could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ExpenseApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url if base_url is not None else config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        logger.info("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach the expense service: {exc}") from exc

        if resp.status_code >= 400:
            detail = (resp.text or "").strip() or resp.reason or "error"
            logger.error("%s %s -> %s %s", method, url, resp.status_code, detail)
            raise ApiError(f"Expense service answered {resp.status_code}: {detail}", status_code=resp.status_code)
        return resp

    def list_expenses(self) -> List[Transaction]:
        resp = self._request("GET", EXPENSES_PATH)
        try:
            body = resp.json()
        except ValueError as exc:
            raise ApiError("Expense service returned a body that is not JSON") from exc
        if body is not None and not isinstance(body, list):
            raise ApiError(f"Expected a list of expenses, got {type(body).__name__}")

        txns = decode_transactions(body)
        logger.info("Loaded %d transactions", len(txns))
        return txns

    def add_expense(self, payload: dict) -> None:
        self._request("POST", EXPENSES_PATH, json=payload)

    def upload_statement(self, filename: str, content: bytes, content_type: str = "application/pdf") -> str:
        """Sends a PDF statement; returns the backend's message verbatim."""
        resp = self._request("POST", UPLOAD_PATH, files={"file": (filename, content, content_type)})
        return resp.text
