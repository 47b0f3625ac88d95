import logging
from typing import Protocol

from domain.exceptions.currency import CacheError, SnapshotNotFoundError
from domain.models.currency import NEVER_FETCHED, RateSnapshot

logger = logging.getLogger(__name__)

LAST_FETCH_TIME_KEY = 'last_fetch_time'
SNAPSHOT_KEY = 'currencies'


class KeyValueStore(Protocol):
	async def insert(self, key: str, value: str) -> None: ...

	async def retrieve(self, key: str) -> str | None: ...


class RateStore:
	"""Persists the latest rate snapshot and the time it was fetched.

	The two values live under separate keys and are written independently,
	so a failure between the writes can leave a new timestamp next to an
	old snapshot.
	"""

	def __init__(self, store: KeyValueStore, key_prefix: str = ''):
		self.store = store
		self.last_fetch_time_key = f'{key_prefix}{LAST_FETCH_TIME_KEY}'
		self.snapshot_key = f'{key_prefix}{SNAPSHOT_KEY}'

	async def save_last_fetch_time(self, timestamp: float) -> None:
		await self.store.insert(self.last_fetch_time_key, repr(float(timestamp)))

	async def get_last_fetch_time(self) -> float:
		"""Return the stored fetch time, or NEVER_FETCHED when none was saved."""
		raw = await self.store.retrieve(self.last_fetch_time_key)
		if raw is None:
			return NEVER_FETCHED
		try:
			return float(raw)
		except ValueError as e:
			raise CacheError(f'Stored fetch time is not a number: {raw!r}') from e

	async def save_snapshot(self, snapshot: RateSnapshot) -> None:
		await self.store.insert(self.snapshot_key, snapshot.to_json())

	async def get_snapshot(self) -> RateSnapshot:
		raw = await self.store.retrieve(self.snapshot_key)
		if raw is None:
			raise SnapshotNotFoundError(f'No rate snapshot stored under {self.snapshot_key}')
		return RateSnapshot.from_json(raw)
