import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import ProviderError, SnapshotDecodeError
from domain.models.currency import RateSnapshot

logger = logging.getLogger(__name__)


class OpenExchangeProvider:
    BASE_URL = "https://openexchangerates.org/api"

    def __init__(
        self,
        app_id: str,
        client: httpx.AsyncClient | None = None,
        timeout: int = 10,
        base_currency: str | None = None,
        retry_attempts: int = 3,
        retry_wait_seconds: float = 1,
    ):
        self.app_id = app_id
        self.base_currency = base_currency
        self.retry_attempts = retry_attempts
        self.retry_wait_seconds = retry_wait_seconds
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "openexchange"

    def _retrying(self) -> AsyncRetrying:
        # Only transport failures are retried; HTTP errors surface immediately.
        return AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_wait_seconds, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )

    async def _request(self, endpoint: str, params: dict) -> dict:
        params["app_id"] = self.app_id
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            async for attempt in self._retrying():
                with attempt:
                    response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"OpenExchange HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f"OpenExchange request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise ProviderError(f"OpenExchange response parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise ProviderError("OpenExchange response parsing error: expected a JSON object")

        if data.get("error"):
            message = data.get("description", data.get("message", "Unknown error"))
            raise ProviderError(f"OpenExchange API error: {message}")

        return data

    async def fetch_rates(self) -> RateSnapshot:
        params = {}
        if self.base_currency:
            params["base"] = self.base_currency

        data = await self._request("latest.json", params)
        try:
            snapshot = RateSnapshot.from_json(data)
        except SnapshotDecodeError as e:
            raise ProviderError(f"OpenExchange returned an invalid rates payload: {e}") from e

        logger.info(f"Fetched {len(snapshot.rates)} rates from {self.name}")
        return snapshot

    async def close(self) -> None:
        await self._client.aclose()
