"""Unit tests for CredentialCache."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from cashcast.domain.shared.value_objects import SecureString
from cashcast.infrastructure.security import CredentialCache


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return CredentialCache(ttl=timedelta(minutes=5), clock=clock)


class TestCredentialCache:
    def test_put_then_get(self, cache):
        cache.put("ledger", SecureString("key-1"))

        assert cache.get("ledger") == SecureString("key-1")
        assert "ledger" in cache

    def test_missing_key(self, cache):
        assert cache.get("ledger") is None
        assert "ledger" not in cache

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.put("ledger", SecureString("key-1"))

        clock.advance(minutes=4, seconds=59)
        assert cache.get("ledger") is not None

        clock.advance(seconds=1)
        assert cache.get("ledger") is None

    def test_invalidate_drops_single_key(self, cache):
        cache.put("ledger", SecureString("key-1"))
        cache.put("other", SecureString("key-2"))

        cache.invalidate("ledger")
        cache.invalidate("never-stored")

        assert cache.get("ledger") is None
        assert cache.get("other") == SecureString("key-2")

    def test_clear(self, cache):
        cache.put("ledger", SecureString("key-1"))

        cache.clear()

        assert "ledger" not in cache


class TestGetOrLoad:
    def test_loader_called_once_while_fresh(self, cache):
        loader = Mock(return_value=SecureString("key-1"))

        first = cache.get_or_load("ledger", loader)
        second = cache.get_or_load("ledger", loader)

        assert first == second == SecureString("key-1")
        loader.assert_called_once()

    def test_reloads_after_expiry(self, cache, clock):
        loader = Mock(side_effect=[SecureString("key-1"), SecureString("key-2")])

        cache.get_or_load("ledger", loader)
        clock.advance(minutes=6)

        assert cache.get_or_load("ledger", loader) == SecureString("key-2")

    def test_loader_errors_are_not_cached(self, cache):
        loader = Mock(side_effect=[RuntimeError("vault down"), SecureString("key-1")])

        with pytest.raises(RuntimeError):
            cache.get_or_load("ledger", loader)

        assert cache.get_or_load("ledger", loader) == SecureString("key-1")
