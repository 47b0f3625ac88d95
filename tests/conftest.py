"""
Shared test configuration and fixtures.
"""

import pytest

from domain.exceptions.currency import CacheError
from domain.models.currency import Rate, RateSnapshot


class InMemoryKeyValueStore:
    """Dict-backed key/value store with switchable failures."""

    def __init__(self):
        self.storage: dict[str, str] = {}
        self.fail_on_insert = False
        self.fail_on_retrieve = False
        self.insert_calls: list[str] = []

    async def insert(self, key: str, value: str) -> None:
        self.insert_calls.append(key)
        if self.fail_on_insert:
            raise CacheError(f"insert failed for {key}")
        self.storage[key] = value

    async def retrieve(self, key: str) -> str | None:
        if self.fail_on_retrieve:
            raise CacheError(f"retrieve failed for {key}")
        return self.storage.get(key)


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def sample_snapshot():
    return RateSnapshot(rates={"USD": 1.0, "EUR": 0.85, "JPY": 110.0, "GBP": 0.75})


@pytest.fixture
def sample_rates(sample_snapshot):
    return [Rate(currency=code, rate=value) for code, value in sample_snapshot.rates.items()]
