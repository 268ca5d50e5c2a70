"""Unit tests for the composition root."""

import httpx
import pytest
from cryptography.fernet import Fernet

from cashcast.application.services import FinancialContextAggregator
from cashcast.bootstrap import (
    build_api_key_loader,
    create_aggregator,
    create_ledger_client,
    open_aggregator,
)
from cashcast.domain.shared.exceptions import DomainException, ErrorCode
from cashcast.infrastructure.security import FernetEncryptionService
from cashcast_config import Settings


def _settings(**overrides) -> Settings:
    values = {
        "ledger_api_key": None,
        "ledger_api_key_encrypted": None,
        "encryption_key": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestApiKeyLoader:
    def test_plaintext_key(self):
        load = build_api_key_loader(_settings(ledger_api_key="anon-key"))

        assert load().get_value() == "anon-key"

    def test_encrypted_key_takes_precedence(self):
        key = Fernet.generate_key().decode()
        token = FernetEncryptionService(key).encrypt("service-key")

        load = build_api_key_loader(
            _settings(
                ledger_api_key="anon-key",
                ledger_api_key_encrypted=token,
                encryption_key=key,
            ),
        )

        assert load().get_value() == "service-key"

    def test_encrypted_key_without_encryption_key(self):
        load = build_api_key_loader(_settings(ledger_api_key_encrypted="token"))

        with pytest.raises(DomainException) as exc_info:
            load()

        assert exc_info.value.code == ErrorCode.MISSING_CREDENTIALS

    def test_no_key_configured(self):
        load = build_api_key_loader(_settings())

        with pytest.raises(DomainException, match="No ledger API key"):
            load()


class TestWiring:
    @pytest.mark.asyncio
    async def test_client_uses_configured_url(self):
        settings = _settings(ledger_api_url="https://ledger.example.com")

        async with create_ledger_client(settings) as client:
            assert client.base_url.host == "ledger.example.com"
            assert client.base_url.scheme == "https"

    @pytest.mark.asyncio
    async def test_create_aggregator(self):
        async with httpx.AsyncClient() as client:
            aggregator = create_aggregator(client, settings=_settings())

        assert isinstance(aggregator, FinancialContextAggregator)

    @pytest.mark.asyncio
    async def test_open_aggregator_degrades_without_credentials(self):
        async with open_aggregator(_settings()) as aggregator:
            context = await aggregator.build_context("user-1")

        assert context.summary.balance == 0
        assert "account" in context.degraded
