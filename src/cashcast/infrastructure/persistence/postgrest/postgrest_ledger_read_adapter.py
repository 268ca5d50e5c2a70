"""PostgREST (Supabase-style) implementation of LedgerReadPort.

Each port method is one ``GET /rest/v1/<table>`` with ``user_id=eq.<id>``
and column filters in PostgREST's query syntax. Rows that fail validation
are skipped with a warning so one malformed record does not hide the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cashcast.application.ports import LedgerReadPort
from cashcast.domain.ledger import Account, Budget, Subscription, Transaction
from cashcast.domain.shared.exceptions import DataSourceError, ErrorCode
from cashcast.domain.shared.value_objects import SecureString
from cashcast.infrastructure.security import CredentialCache

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

LEDGER_API_KEY = "ledger_api_key"
REST_PREFIX = "/rest/v1"


class PostgrestLedgerReadAdapter(LedgerReadPort):
    """Read ledger tables over HTTP with a cached API key."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        credentials: CredentialCache,
        api_key_loader: Callable[[], SecureString],
    ):
        self._client = client
        self._credentials = credentials
        self._api_key_loader = api_key_loader

    async def get_account(self, user_id: str) -> Account:
        rows = await self._select(
            "accounts",
            {
                "select": "balance,currency",
                "user_id": f"eq.{user_id}",
                "limit": "1",
            },
        )
        accounts = self._parse_rows(Account, rows, "accounts")
        if not accounts:
            logger.debug("No account row for user %s, using zero balance", user_id)
            return Account.empty()
        return accounts[0]

    async def list_transactions(self, user_id: str, since: date) -> list[Transaction]:
        rows = await self._select(
            "transactions",
            {
                "select": "amount,date,category,description",
                "user_id": f"eq.{user_id}",
                "date": f"gte.{since.isoformat()}",
                "order": "date.asc",
            },
        )
        return self._parse_rows(Transaction, rows, "transactions")

    async def list_active_subscriptions(self, user_id: str) -> list[Subscription]:
        rows = await self._select(
            "subscriptions",
            {
                "select": "amount,next_billing_date,status,name",
                "user_id": f"eq.{user_id}",
                "status": "eq.active",
            },
        )
        return self._parse_rows(Subscription, rows, "subscriptions")

    async def list_budgets(self, user_id: str) -> list[Budget]:
        rows = await self._select(
            "budgets",
            {
                "select": "category,amount,period,start_date",
                "user_id": f"eq.{user_id}",
            },
        )
        return self._parse_rows(Budget, rows, "budgets")

    async def _select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        api_key = self._credentials.get_or_load(LEDGER_API_KEY, self._api_key_loader)
        headers = {
            "apikey": api_key.get_value(),
            "Authorization": f"Bearer {api_key.get_value()}",
            "Accept": "application/json",
        }

        try:
            response = await self._client.get(
                f"{REST_PREFIX}/{table}",
                params=params,
                headers=headers,
            )
        except httpx.HTTPError as e:
            msg = f"Ledger store unreachable while reading {table}"
            raise DataSourceError(msg, details={"error": str(e)}) from e

        if response.status_code in (401, 403):
            # Key may have been rotated; reload it on the next request
            self._credentials.invalidate(LEDGER_API_KEY)
            msg = f"Ledger store rejected credentials for {table}"
            raise DataSourceError(msg, code=ErrorCode.DATA_SOURCE_UNAUTHORIZED)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = f"Ledger store returned {response.status_code} for {table}"
            raise DataSourceError(msg, details={"body": response.text[:200]}) from e

        try:
            payload = response.json()
        except ValueError as e:
            msg = f"Ledger store returned invalid JSON for {table}"
            raise DataSourceError(msg, code=ErrorCode.INVALID_RESPONSE) from e

        if not isinstance(payload, list):
            msg = f"Expected a list of rows for {table}, got {type(payload).__name__}"
            raise DataSourceError(msg, code=ErrorCode.INVALID_RESPONSE)
        return payload

    @staticmethod
    def _parse_rows(
        model: type[ModelT],
        rows: list[dict[str, Any]],
        table: str,
    ) -> list[ModelT]:
        parsed: list[ModelT] = []
        for row in rows:
            try:
                parsed.append(model.model_validate(row))
            except PydanticValidationError as e:
                logger.warning(
                    "Skipping invalid %s row: %d validation error(s)",
                    table,
                    e.error_count(),
                )
        return parsed
