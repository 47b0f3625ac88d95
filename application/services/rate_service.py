import logging
import time
from collections.abc import Callable

from domain.exceptions.currency import CurrencyException, RateFetchError
from domain.models.currency import Rate
from infrastructure.persistence.rate_store import RateStore
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

FRESHNESS_THRESHOLD_SECONDS = 1800


class RateCacheService:
    """Serves rates from the store while they are fresh, refetches otherwise.

    A remote failure is never papered over with the stale snapshot: callers
    get a RateFetchError and decide whether to retry.
    """

    def __init__(
        self,
        provider: ExchangeRateProvider,
        rate_store: RateStore,
        clock: Callable[[], float] = time.time,
    ):
        self.provider = provider
        self.rate_store = rate_store
        self.clock = clock
        self.latest_rates: list[Rate] = []

    async def get_latest_rates(self) -> list[Rate]:
        now = self.clock()

        try:
            last_fetch_time = await self.rate_store.get_last_fetch_time()
            if self._is_stale(last_fetch_time, now):
                rates = await self._fetch_from_remote(now)
            else:
                rates = await self._fetch_from_store()
        except CurrencyException as e:
            logger.error(f"Failed to get latest rates: {e}")
            raise RateFetchError("Failed to get latest rates") from e

        self.latest_rates = rates
        return rates

    async def get_sorted_currency_list(self) -> list[str]:
        if not self.latest_rates:
            await self.get_latest_rates()
        return sorted(rate.currency for rate in self.latest_rates)

    @staticmethod
    def _is_stale(last_fetch_time: float, now: float) -> bool:
        return now - last_fetch_time > FRESHNESS_THRESHOLD_SECONDS

    async def _fetch_from_remote(self, now: float) -> list[Rate]:
        logger.info(f"Cached rates are stale, fetching from {self.provider.name}")
        snapshot = await self.provider.fetch_rates()

        # Two independent writes; a failure in between leaves the store inconsistent.
        await self.rate_store.save_last_fetch_time(now)
        await self.rate_store.save_snapshot(snapshot)

        return snapshot.to_rates()

    async def _fetch_from_store(self) -> list[Rate]:
        logger.info("Serving cached rates")
        snapshot = await self.rate_store.get_snapshot()
        return snapshot.to_rates()
