# nosec B101


import pytest
import pytest_asyncio

from domain.models.currency import RateSnapshot
from infrastructure.persistence.database import Database
from infrastructure.persistence.rate_store import RateStore
from infrastructure.persistence.repositories.key_value import SqlKeyValueStore


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await db.create_tables()
    store = SqlKeyValueStore(db)
    yield store
    await store.close()


@pytest.mark.asyncio
async def test_retrieve_missing_key_returns_none(sql_store):
    assert await sql_store.retrieve('currencies') is None


@pytest.mark.asyncio
async def test_insert_then_retrieve(sql_store):
    await sql_store.insert('last_fetch_time', '1707993600.0')

    assert await sql_store.retrieve('last_fetch_time') == '1707993600.0'


@pytest.mark.asyncio
async def test_insert_overwrites_existing_value(sql_store):
    await sql_store.insert('currencies', '{"rates": {"USD": 1.0}}')
    await sql_store.insert('currencies', '{"rates": {"USD": 1.2}}')

    assert await sql_store.retrieve('currencies') == '{"rates": {"USD": 1.2}}'


@pytest.mark.asyncio
async def test_rate_store_round_trip_over_sql(sql_store):
    rate_store = RateStore(sql_store)
    snapshot = RateSnapshot(rates={'USD': 1.0, 'EUR': 0.85, 'JPY': 110.0})

    await rate_store.save_last_fetch_time(1707993600.5)
    await rate_store.save_snapshot(snapshot)

    assert await rate_store.get_last_fetch_time() == 1707993600.5
    assert await rate_store.get_snapshot() == snapshot
