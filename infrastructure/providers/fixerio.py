import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import ProviderError, SnapshotDecodeError
from domain.models.currency import RateSnapshot

logger = logging.getLogger(__name__)


class FixerIOProvider:
	BASE_URL = 'http://data.fixer.io/api'

	def __init__(
		self,
		api_key: str,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		base_currency: str | None = None,
		retry_attempts: int = 3,
		retry_wait_seconds: float = 1,
	):
		self.api_key = api_key
		self.base_currency = base_currency
		self.retry_attempts = retry_attempts
		self.retry_wait_seconds = retry_wait_seconds
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'fixerio'

	async def _request(self, endpoint: str, params: dict) -> dict:
		params['access_key'] = self.api_key
		url = f'{self.BASE_URL}/{endpoint}'

		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.retry_attempts),
			wait=wait_exponential(multiplier=self.retry_wait_seconds, max=10),
			retry=retry_if_exception_type(httpx.TransportError),
			reraise=True,
		)
		try:
			async for attempt in retrying:
				with attempt:
					response = await self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Fixer.io HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Fixer.io request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Fixer.io response parsing error: {str(e)}') from e

		if not isinstance(data, dict) or not data.get('success', False):
			info = 'Unknown error'
			if isinstance(data, dict):
				info = data.get('error', {}).get('info', info)
			raise ProviderError(f'Fixer.io API error: {info}')

		return data

	async def fetch_rates(self) -> RateSnapshot:
		params = {}
		if self.base_currency:
			params['base'] = self.base_currency

		data = await self._request('latest', params)
		try:
			snapshot = RateSnapshot.from_json(data)
		except SnapshotDecodeError as e:
			raise ProviderError(f'Fixer.io returned an invalid rates payload: {e}') from e

		logger.info(f'Fetched {len(snapshot.rates)} rates from {self.name}')
		return snapshot

	async def close(self) -> None:
		await self._client.aclose()
