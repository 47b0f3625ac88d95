import logging

from redis import RedisError
from redis import asyncio as redis

from domain.exceptions.currency import CacheError

logger = logging.getLogger(__name__)


class RedisKeyValueStore:
	"""String key/value store on top of an async Redis client.

	Entries never expire: staleness is decided by the stored fetch time,
	not by a Redis TTL.
	"""

	def __init__(self, redis_client: redis.Redis):
		self.redis = redis_client

	async def insert(self, key: str, value: str) -> None:
		try:
			await self.redis.set(key, value)
		except RedisError as e:
			logger.error(f'Redis insert failed for {key}: {e}')
			raise CacheError(f'Failed to insert {key}: {e}') from e

	async def retrieve(self, key: str) -> str | None:
		# decode_responses clients raise UnicodeDecodeError from inside get()
		try:
			data = await self.redis.get(key)
			if isinstance(data, bytes):
				data = data.decode('utf-8')
		except (RedisError, UnicodeDecodeError) as e:
			logger.error(f'Redis retrieve failed for {key}: {e}')
			raise CacheError(f'Failed to retrieve {key}: {e}') from e

		return data

	async def close(self) -> None:
		await self.redis.aclose()
