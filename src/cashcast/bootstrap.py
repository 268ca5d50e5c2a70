"""Composition root: settings -> credentials -> HTTP client -> aggregator."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import timedelta

import httpx

from cashcast.application.services import FinancialContextAggregator
from cashcast.domain.analytics.services import PaydayEstimator
from cashcast.domain.shared.exceptions import DomainException, ErrorCode
from cashcast.domain.shared.value_objects import SecureString
from cashcast.infrastructure.persistence.postgrest import PostgrestLedgerReadAdapter
from cashcast.infrastructure.security import CredentialCache, FernetEncryptionService
from cashcast.logging_config import configure_logging
from cashcast_config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_api_key_loader(settings: Settings) -> Callable[[], SecureString]:
    """Return a loader yielding the ledger API key.

    An encrypted key (decrypted with ``encryption_key``) takes precedence
    over a plaintext one.
    """

    def load() -> SecureString:
        if settings.ledger_api_key_encrypted:
            if settings.encryption_key is None:
                msg = "LEDGER_API_KEY_ENCRYPTED is set but ENCRYPTION_KEY is missing"
                raise DomainException(msg, code=ErrorCode.MISSING_CREDENTIALS)
            service = FernetEncryptionService(
                settings.encryption_key.get_secret_value(),
            )
            return service.decrypt(settings.ledger_api_key_encrypted)

        if settings.ledger_api_key is not None:
            return SecureString.from_secret(settings.ledger_api_key)

        msg = "No ledger API key configured"
        raise DomainException(msg, code=ErrorCode.MISSING_CREDENTIALS)

    return load


def create_ledger_client(settings: Settings) -> httpx.AsyncClient:
    timeout = httpx.Timeout(
        connect=5.0,
        read=settings.ledger_timeout,
        write=10.0,
        pool=5.0,
    )
    return httpx.AsyncClient(base_url=settings.ledger_api_url, timeout=timeout)


def create_aggregator(
    client: httpx.AsyncClient,
    settings: Settings | None = None,
    credentials: CredentialCache | None = None,
) -> FinancialContextAggregator:
    settings = settings or get_settings()
    credentials = credentials or CredentialCache(
        ttl=timedelta(seconds=settings.credential_cache_ttl_seconds),
    )
    adapter = PostgrestLedgerReadAdapter(
        client=client,
        credentials=credentials,
        api_key_loader=build_api_key_loader(settings),
    )
    return FinancialContextAggregator(
        ledger_read_port=adapter,
        history_days=settings.history_days,
        payday_estimator=PaydayEstimator(settings.payday_cadence_days),
    )


@asynccontextmanager
async def open_aggregator(
    settings: Settings | None = None,
) -> AsyncIterator[FinancialContextAggregator]:
    """Yield a ready aggregator and close its HTTP client afterwards."""
    settings = settings or get_settings()
    configure_logging()
    async with create_ledger_client(settings) as client:
        logger.info("Ledger client opened for %s", settings.ledger_api_url)
        yield create_aggregator(client, settings=settings)
