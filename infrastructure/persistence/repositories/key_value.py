import logging

from sqlalchemy.exc import SQLAlchemyError

from domain.exceptions.currency import CacheError
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.currency import KeyValueEntryDB

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
	"""Durable key/value store backed by the ``kv_entries`` table."""

	def __init__(self, db: Database):
		self.db = db

	async def insert(self, key: str, value: str) -> None:
		try:
			async with self.db.session() as session:
				entry = await session.get(KeyValueEntryDB, key)
				if entry is None:
					session.add(KeyValueEntryDB(key=key, value=value))
				else:
					entry.value = value
		except SQLAlchemyError as e:
			logger.error(f'SQL insert failed for {key}: {e}')
			raise CacheError(f'Failed to insert {key}: {e}') from e

	async def retrieve(self, key: str) -> str | None:
		try:
			async with self.db.session() as session:
				entry = await session.get(KeyValueEntryDB, key)
				return entry.value if entry is not None else None
		except SQLAlchemyError as e:
			logger.error(f'SQL retrieve failed for {key}: {e}')
			raise CacheError(f'Failed to retrieve {key}: {e}') from e

	async def close(self) -> None:
		await self.db.close()
